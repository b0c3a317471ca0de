"""
Base test case: a fresh database and a logged-in TestClient per test.
"""
import os
import unittest

from fastapi.testclient import TestClient

from autodetail.config import get_settings
from autodetail.main import app

settings = get_settings()


def database_path():
    return settings.database_url.split(":///", 1)[1]


class ApiTestCase(unittest.TestCase):
    """Starts the app (schema + seeded user) on an empty database."""

    log_in = True

    def setUp(self):
        path = database_path()
        if os.path.exists(path):
            os.remove(path)

        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

        if self.log_in:
            self.login()

    def login(self, email=None, password=None):
        response = self.client.post("/api/login", json={
            "email": email or settings.default_user_email,
            "password": password or settings.default_user_password,
        })
        self.assertEqual(response.status_code, 200, response.text)
        return response

    # Master data helpers

    def create_vehicle_type(self, name="SUV"):
        response = self.client.post("/api/masters/vehicle-types", json={"name": name})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def create_service(self, name="Ceramic Coating", prices=None):
        prices = prices or {"SUV": 1000, "Hatchback": 800}
        response = self.client.post("/api/masters/services", json={
            "name": name,
            "pricing_by_vehicle_type": [
                {"vehicle_type": vehicle_type, "price": price}
                for vehicle_type, price in prices.items()
            ],
        })
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def create_ppf(self, name="Garware Premium", rolls=None):
        response = self.client.post("/api/masters/ppf", json={
            "name": name,
            "pricing_by_vehicle_type": [
                {"vehicle_type": "SUV", "options": [
                    {"warranty_name": "3 Years", "price": 40000},
                    {"warranty_name": "5 Years", "price": 60000},
                ]},
            ],
            "rolls": rolls if rolls is not None else [{"name": "Roll A", "stock": 150}],
        })
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def create_accessory(self, name="Floor Mats", price=500, category="Interior"):
        response = self.client.post("/api/masters/accessories", json={
            "category": category, "name": name, "quantity": 10, "price": price,
        })
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    # Job card helpers

    def job_card_payload(self, **overrides):
        payload = {
            "customer_name": "Ravi Kumar",
            "phone_number": "9876543210",
            "email_address": "",
            "referral_source": "Walk-in",
            "make": "Hyundai",
            "model": "Creta",
            "year": "2023",
            "license_plate": "KA01AB1234",
            "vehicle_type": "SUV",
            "services": [{"name": "Ceramic Coating", "price": 1000}],
            "ppfs": [],
            "accessories": [{"name": "Floor Mats", "price": 500}],
            "labor_charge": 200,
            "discount": 100,
            "gst": 18,
        }
        payload.update(overrides)
        return payload

    def create_job_card(self, **overrides):
        response = self.client.post("/api/job-cards", json=self.job_card_payload(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()
