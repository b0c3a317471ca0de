import unittest

from tests.api_case import ApiTestCase


def inquiry_payload(**overrides):
    payload = {
        "customer_name": "Meera Shah",
        "phone": "9123456780",
        "email": "meera@example.com",
        "services": [
            {"service_name": "Ceramic Coating", "vehicle_type": "SUV",
             "price": 1000, "customer_price": 1200},
            {"service_name": "Garware Premium", "vehicle_type": "SUV",
             "warranty_name": "5 Years", "price": 60000, "customer_price": 65000},
        ],
        "accessories": [
            {"accessory_name": "Floor Mats", "category": "Interior",
             "price": 500, "customer_price": 650},
        ],
        "notes": "Wants a weekend slot",
    }
    payload.update(overrides)
    return payload


class TestInquiries(ApiTestCase):

    def create_inquiry(self, **overrides):
        response = self.client.post("/api/inquiries", json=inquiry_payload(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_prices_are_summed_server_side(self):
        inquiry = self.create_inquiry(our_price=1, customer_price=1)
        self.assertEqual(inquiry["our_price"], 61500)
        self.assertEqual(inquiry["customer_price"], 66850)
        self.assertEqual(inquiry["markup"], 5350)
        self.assertTrue(inquiry["inquiry_id"].startswith("INQ-"))
        self.assertTrue(inquiry["inquiry_id"][4:].isdigit())

    def test_inquiry_ids_are_unique(self):
        ids = {self.create_inquiry()["inquiry_id"] for _ in range(5)}
        self.assertEqual(len(ids), 5)

    def test_empty_inquiry_prices_to_zero(self):
        inquiry = self.create_inquiry(services=[], accessories=[])
        self.assertEqual(inquiry["our_price"], 0)
        self.assertEqual(inquiry["markup"], 0)

    def test_search_by_name_or_phone(self):
        self.create_inquiry()
        self.create_inquiry(customer_name="Arun Das", phone="9000011111")

        by_name = self.client.get("/api/inquiries", params={"search": "meera"}).json()
        self.assertEqual([i["customer_name"] for i in by_name], ["Meera Shah"])

        by_phone = self.client.get("/api/inquiries", params={"search": "00011"}).json()
        self.assertEqual([i["customer_name"] for i in by_phone], ["Arun Das"])

    def test_service_filter(self):
        self.create_inquiry()
        self.create_inquiry(customer_name="Arun Das", services=[])

        response = self.client.get("/api/inquiries", params={"service": "Ceramic Coating"})
        self.assertEqual([i["customer_name"] for i in response.json()], ["Meera Shah"])

    def test_missing_name_is_400(self):
        response = self.client.post("/api/inquiries", json=inquiry_payload(customer_name=""))
        self.assertEqual(response.status_code, 400)

    def test_get_and_delete(self):
        inquiry = self.create_inquiry()
        response = self.client.get(f"/api/inquiries/{inquiry['id']}")
        self.assertEqual(response.json()["inquiry_id"], inquiry["inquiry_id"])

        self.assertEqual(self.client.delete(f"/api/inquiries/{inquiry['id']}").status_code, 204)
        response = self.client.get(f"/api/inquiries/{inquiry['id']}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Inquiry not found")


if __name__ == "__main__":
    unittest.main()
