"""
Auto detailing shop manager: job cards, inquiries, invoices and master data.
"""
