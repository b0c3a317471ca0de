import unittest

from tests.api_case import ApiTestCase


class TestVehicleTypes(ApiTestCase):

    def test_crud(self):
        suv = self.create_vehicle_type("SUV")
        self.create_vehicle_type("Hatchback")

        response = self.client.get("/api/masters/vehicle-types")
        self.assertEqual([v["name"] for v in response.json()], ["SUV", "Hatchback"])

        response = self.client.patch(f"/api/masters/vehicle-types/{suv['id']}", json={"name": "Large SUV"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Large SUV")

        response = self.client.delete(f"/api/masters/vehicle-types/{suv['id']}")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(len(self.client.get("/api/masters/vehicle-types").json()), 1)

    def test_duplicate_name_is_400(self):
        self.create_vehicle_type("SUV")
        response = self.client.post("/api/masters/vehicle-types", json={"name": "SUV"})
        self.assertEqual(response.status_code, 400)

    def test_empty_name_is_400(self):
        response = self.client.post("/api/masters/vehicle-types", json={"name": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error_type"], "validation_error")

    def test_blank_name_is_400(self):
        response = self.client.post("/api/masters/vehicle-types", json={"name": "   "})
        self.assertEqual(response.status_code, 400)

    def test_name_is_trimmed(self):
        self.assertEqual(self.create_vehicle_type("  SUV ")["name"], "SUV")

    def test_missing_is_404(self):
        response = self.client.delete("/api/masters/vehicle-types/999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Vehicle type not found")


class TestServiceMasters(ApiTestCase):

    def test_create_and_list(self):
        service = self.create_service("Ceramic Coating", {"SUV": 1000})
        self.assertEqual(service["pricing_by_vehicle_type"], [{"vehicle_type": "SUV", "price": 1000.0}])

        response = self.client.get("/api/masters/services")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 1)

    def test_partial_update_keeps_other_fields(self):
        service = self.create_service("Ceramic Coating", {"SUV": 1000})
        response = self.client.patch(f"/api/masters/services/{service['id']}", json={"name": "Ceramic Pro"})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["name"], "Ceramic Pro")
        self.assertEqual(data["pricing_by_vehicle_type"][0]["price"], 1000.0)

    def test_negative_price_is_400(self):
        response = self.client.post("/api/masters/services", json={
            "name": "Wash", "pricing_by_vehicle_type": [{"vehicle_type": "SUV", "price": -1}],
        })
        self.assertEqual(response.status_code, 400)

    def test_update_and_delete_missing_are_404(self):
        self.assertEqual(self.client.patch("/api/masters/services/42", json={"name": "x"}).status_code, 404)
        self.assertEqual(self.client.delete("/api/masters/services/42").status_code, 404)


class TestPPFMasters(ApiTestCase):

    def test_create_with_pricing_matrix_and_rolls(self):
        ppf = self.create_ppf(rolls=[{"name": "Roll A", "stock": 150}, {"name": "Roll B", "stock": 80}])
        self.assertEqual(ppf["pricing_by_vehicle_type"][0]["options"][1]["warranty_name"], "5 Years")
        self.assertEqual([r["stock"] for r in ppf["rolls"]], [150.0, 80.0])

    def test_update_replaces_rolls(self):
        ppf = self.create_ppf()
        response = self.client.patch(f"/api/masters/ppf/{ppf['id']}", json={
            "rolls": [{"name": "Roll C", "stock": 20}],
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["rolls"], [{"name": "Roll C", "stock": 20.0}])
        self.assertEqual(len(response.json()["pricing_by_vehicle_type"]), 1)

    def test_delete(self):
        ppf = self.create_ppf()
        self.assertEqual(self.client.delete(f"/api/masters/ppf/{ppf['id']}").status_code, 204)
        self.assertEqual(self.client.get(f"/api/masters/ppf/{ppf['id']}").status_code, 404)


class TestAccessories(ApiTestCase):

    def create_category(self, name):
        response = self.client.post("/api/masters/accessory-categories", json={"name": name})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_category_lists_its_accessories_by_name(self):
        interior = self.create_category("Interior")
        self.create_category("Exterior")
        self.create_accessory("Floor Mats", category="Interior")
        self.create_accessory("Mud Flaps", category="Exterior")

        response = self.client.get(f"/api/masters/accessory-categories/{interior['id']}/accessories")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([a["name"] for a in response.json()], ["Floor Mats"])

    def test_renaming_category_carries_its_accessories(self):
        interior = self.create_category("Interior")
        self.create_accessory("Floor Mats", category="Interior")

        response = self.client.patch(
            f"/api/masters/accessory-categories/{interior['id']}", json={"name": "Cabin"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Cabin")

        accessories = self.client.get("/api/masters/accessories", params={"category": "Cabin"}).json()
        self.assertEqual([a["name"] for a in accessories], ["Floor Mats"])

    def test_duplicate_category_is_400(self):
        self.create_category("Interior")
        response = self.client.post("/api/masters/accessory-categories", json={"name": "Interior"})
        self.assertEqual(response.status_code, 400)

    def test_blank_category_name_is_400(self):
        response = self.client.post("/api/masters/accessory-categories", json={"name": "   "})
        self.assertEqual(response.status_code, 400)

        category = self.create_category("Interior")
        response = self.client.patch(f"/api/masters/accessory-categories/{category['id']}", json={"name": " "})
        self.assertEqual(response.status_code, 400)

    def test_accessory_update_and_delete(self):
        accessory = self.create_accessory("Floor Mats", price=500)
        response = self.client.patch(f"/api/masters/accessories/{accessory['id']}", json={"price": 650})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["price"], 650.0)
        self.assertEqual(response.json()["quantity"], 10)

        self.assertEqual(self.client.delete(f"/api/masters/accessories/{accessory['id']}").status_code, 204)
        self.assertEqual(self.client.delete(f"/api/masters/accessories/{accessory['id']}").status_code, 404)

    def test_deleting_category_keeps_accessories(self):
        interior = self.create_category("Interior")
        self.create_accessory("Floor Mats", category="Interior")
        self.assertEqual(
            self.client.delete(f"/api/masters/accessory-categories/{interior['id']}").status_code, 204,
        )
        self.assertEqual(len(self.client.get("/api/masters/accessories").json()), 1)


class TestTechnicians(ApiTestCase):

    def test_crud_and_status_filter(self):
        response = self.client.post("/api/technicians", json={
            "name": "Arjun", "specialty": "PPF", "phone": "9000000001",
        })
        self.assertEqual(response.status_code, 201)
        arjun = response.json()
        self.assertEqual(arjun["status"], "active")

        self.client.post("/api/technicians", json={"name": "Meena", "specialty": "Detailing"})

        response = self.client.patch(f"/api/technicians/{arjun['id']}", json={"status": "inactive"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "inactive")
        self.assertEqual(response.json()["phone"], "9000000001")

        active = self.client.get("/api/technicians", params={"status_filter": "active"}).json()
        self.assertEqual([t["name"] for t in active], ["Meena"])

        self.assertEqual(self.client.delete(f"/api/technicians/{arjun['id']}").status_code, 204)
        self.assertEqual(len(self.client.get("/api/technicians").json()), 1)

    def test_bad_status_is_400(self):
        response = self.client.post("/api/technicians", json={
            "name": "Arjun", "specialty": "PPF", "status": "on-leave",
        })
        self.assertEqual(response.status_code, 400)

    def test_missing_specialty_is_400(self):
        response = self.client.post("/api/technicians", json={"name": "Arjun"})
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
