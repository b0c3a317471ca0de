import unittest

from tests.api_case import ApiTestCase


class TestInvoices(ApiTestCase):

    def complete(self, job):
        response = self.client.patch(f"/api/job-cards/{job['id']}", json={"status": "Completed"})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def test_only_completed_job_cards_have_invoices(self):
        pending = self.create_job_card()
        self.assertEqual(self.client.get("/api/invoices").json(), [])
        self.assertEqual(self.client.get(f"/api/invoices/{pending['id']}").status_code, 404)

        self.complete(pending)
        invoices = self.client.get("/api/invoices").json()
        self.assertEqual(len(invoices), 1)
        self.assertEqual(invoices[0]["job_card_id"], pending["id"])

    def test_invoice_totals_match_the_job_card(self):
        job = self.complete(self.create_job_card(
            accessories=[{"name": "Floor Mats", "price": 500, "quantity": 2}],
        ))
        invoice = self.client.get(f"/api/invoices/{job['id']}").json()

        self.assertEqual(invoice["invoice_no"], "INV-" + job["job_no"][3:])
        self.assertEqual(invoice["vehicle_info"], "Hyundai Creta (KA01AB1234)")
        self.assertEqual(invoice["items"], [
            {"name": "Ceramic Coating", "price": 1000.0},
            {"name": "Floor Mats x2", "price": 1000.0},
        ])
        self.assertEqual(invoice["subtotal"], 2200)
        self.assertEqual(invoice["taxable_amount"], 2100)
        self.assertEqual(invoice["gst_amount"], 378)
        self.assertEqual(invoice["total"], 2478)
        self.assertEqual(invoice["total"], job["estimated_cost"])
        self.assertEqual(invoice["business"], "Auto Gamma")

    def test_search_and_business_filters(self):
        first = self.complete(self.create_job_card())
        self.complete(self.create_job_card(customer_name="Sana Iqbal", business="Detail Studio"))

        by_name = self.client.get("/api/invoices", params={"search": "SANA"}).json()
        self.assertEqual([i["customer_name"] for i in by_name], ["Sana Iqbal"])

        by_number = self.client.get("/api/invoices", params={"search": first["job_no"][3:]}).json()
        self.assertEqual([i["job_card_id"] for i in by_number], [first["id"]])

        by_business = self.client.get("/api/invoices", params={"business": "Detail Studio"}).json()
        self.assertEqual([i["customer_name"] for i in by_business], ["Sana Iqbal"])


if __name__ == "__main__":
    unittest.main()
