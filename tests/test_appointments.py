import unittest

from tests.api_case import ApiTestCase


class TestAppointments(ApiTestCase):

    def create_appointment(self, **overrides):
        payload = {
            "customer_name": "Kiran Rao",
            "phone": "9988776655",
            "vehicle_info": "Honda City",
            "service_type": "Ceramic Coating",
            "date": "2026-03-14",
            "time": "10:30",
        }
        payload.update(overrides)
        response = self.client.post("/api/appointments", json=payload)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_create_defaults_to_scheduled(self):
        appointment = self.create_appointment()
        self.assertEqual(appointment["status"], "SCHEDULED")
        self.assertIsNone(appointment["cancel_reason"])

    def test_listed_by_date_and_time(self):
        self.create_appointment(customer_name="Later", date="2026-03-15")
        self.create_appointment(customer_name="Afternoon", time="15:00")
        self.create_appointment(customer_name="Morning", time="09:00")

        names = [a["customer_name"] for a in self.client.get("/api/appointments").json()]
        self.assertEqual(names, ["Morning", "Afternoon", "Later"])

    def test_cancel_keeps_reason_until_rescheduled(self):
        appointment = self.create_appointment()
        url = f"/api/appointments/{appointment['id']}"

        cancelled = self.client.patch(url, json={"status": "CANCELLED", "cancel_reason": "Car not ready"}).json()
        self.assertEqual(cancelled["cancel_reason"], "Car not ready")

        listed = self.client.get("/api/appointments", params={"status_filter": "CANCELLED"}).json()
        self.assertEqual([a["id"] for a in listed], [appointment["id"]])

        rescheduled = self.client.patch(url, json={"status": "SCHEDULED", "date": "2026-03-20"}).json()
        self.assertEqual(rescheduled["date"], "2026-03-20")
        self.assertIsNone(rescheduled["cancel_reason"])

    def test_blanking_required_fields_is_400(self):
        appointment = self.create_appointment()
        response = self.client.patch(f"/api/appointments/{appointment['id']}", json={"customer_name": "", "date": ""})
        self.assertEqual(response.status_code, 400)

    def test_delete(self):
        appointment = self.create_appointment()
        url = f"/api/appointments/{appointment['id']}"
        self.assertEqual(self.client.delete(url).status_code, 204)
        self.assertEqual(self.client.delete(url).status_code, 404)
        self.assertEqual(self.client.patch(url, json={"status": "DONE"}).status_code, 404)

    def test_requires_login(self):
        self.client.post("/api/logout")
        self.assertEqual(self.client.get("/api/appointments").status_code, 401)


if __name__ == "__main__":
    unittest.main()
