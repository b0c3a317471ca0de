import unittest
from datetime import date, datetime, timedelta
from types import SimpleNamespace

from autodetail.models.job_card import JobStatus
from autodetail.routers.dashboard import build_dashboard
from tests.api_case import ApiTestCase

TODAY = date(2026, 3, 12)


def job(status=JobStatus.PENDING, cost=0, phone="1", created=TODAY, completed=None):
    return SimpleNamespace(
        status=status,
        estimated_cost=cost,
        phone_number=phone,
        created_at=datetime.combine(created, datetime.min.time()),
        completed_at=datetime.combine(completed, datetime.min.time()) if completed else None,
    )


def inquiry(phone="1", created=TODAY):
    return SimpleNamespace(phone=phone, created_at=datetime.combine(created, datetime.min.time()))


class TestBuildDashboard(unittest.TestCase):

    def setUp(self):
        yesterday = TODAY - timedelta(days=1)
        jobs = [
            job(JobStatus.COMPLETED, 1888, phone="111", completed=TODAY),
            job(JobStatus.COMPLETED, 1000, phone="222", completed=yesterday),
            job(JobStatus.IN_PROGRESS, 500, phone="333", created=TODAY - timedelta(days=10)),
        ]
        inquiries = [inquiry("111"), inquiry("444", created=yesterday)]
        ppfs = [SimpleNamespace(name="Garware Premium", rolls=[{"name": "A", "stock": 100}, {"name": "B", "stock": 50.5}])]
        self.data = build_dashboard(jobs, inquiries, ppfs, TODAY)

    def test_stats(self):
        values = {stat.label: stat.value for stat in self.data.stats}
        self.assertEqual(values["TODAY'S SALES"], "₹1,888")
        self.assertEqual(values["ACTIVE SERVICE JOBS"], "1")
        self.assertEqual(values["INQUIRIES TODAY"], "1")
        self.assertEqual(values["TOTAL CUSTOMERS"], "4")

    def test_sales_trends_cover_last_seven_days(self):
        trends = self.data.sales_trends
        self.assertEqual(len(trends), 7)
        self.assertEqual(trends[-1].name, TODAY.strftime("%a"))
        self.assertEqual(trends[-1].value, 1888)
        self.assertEqual(trends[-2].value, 1000)
        self.assertEqual(sum(point.value for point in trends[:-2]), 0)

    def test_customer_status(self):
        counts = {point.name: point.value for point in self.data.customer_status}
        self.assertEqual(counts, {
            "New Lead": 2, "Pending": 0, "In Progress": 1, "Completed": 2, "Cancelled": 0,
        })

    def test_customer_growth_by_week(self):
        growth = [(point.name, point.value) for point in self.data.customer_growth]
        self.assertEqual(growth, [("Week 1", 0), ("Week 2", 0), ("Week 3", 1), ("Week 4", 2)])

    def test_inventory_by_category(self):
        self.assertEqual(
            [(point.name, point.value) for point in self.data.inventory_by_category],
            [("Garware Premium", 150.5)],
        )


class TestDashboardRoute(ApiTestCase):

    def test_dashboard_reflects_job_cards(self):
        job_card = self.create_job_card()
        self.client.patch(f"/api/job-cards/{job_card['id']}", json={"status": "Completed"})
        self.create_ppf()

        response = self.client.get("/api/dashboard")
        self.assertEqual(response.status_code, 200)
        data = response.json()

        values = {stat["label"]: stat["value"] for stat in data["stats"]}
        self.assertEqual(values["TODAY'S SALES"], "₹1,888")
        self.assertEqual(values["TOTAL CUSTOMERS"], "1")
        self.assertEqual(data["sales_trends"][-1]["value"], 1888)
        self.assertEqual(data["inventory_by_category"], [{"name": "Garware Premium", "value": 150.0}])


if __name__ == "__main__":
    unittest.main()
