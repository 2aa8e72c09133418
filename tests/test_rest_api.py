import os
import sys
import unittest
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from models import UserLift, UserProfile
from rest_api import LiftAPI
from settings_schema import SettingsSchema

WORKOUT = {
    "id": "legs",
    "title": "Leg Day",
    "exercises": [
        {"id": "squat-barbell", "sets": 3, "reps": "8-12"},
        {"id": "leg-press-machine", "sets": 2, "reps": 10},
    ],
}


class CalculatorAPITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(LiftAPI().app)

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_one_rm(self) -> None:
        response = self.client.get("/one_rm", params={"weight": 225, "reps": 5})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["one_rm"], 260)
        self.assertEqual((data["epley"], data["brzycki"], data["lombardi"]), (263, 253, 264))
        response = self.client.get("/one_rm", params={"weight": 225, "reps": 0})
        self.assertEqual(response.status_code, 400)

    def test_percentage(self) -> None:
        response = self.client.get("/one_rm/percentage", params={"one_rm": 260, "reps": 8})
        self.assertEqual(response.json(), {"percentage": 80, "weight": 208})

    def test_percentile(self) -> None:
        response = self.client.get(
            "/percentile",
            params={"lift_weight": 225, "body_weight": 180, "exercise": "squat-barbell"},
        )
        data = response.json()
        self.assertAlmostEqual(data["percentile"], 25.0)
        self.assertEqual(data["ordinal"], "25th")
        self.assertEqual(data["tier"], "C-")

    def test_percentile_kilograms_unrounded(self) -> None:
        response = self.client.get(
            "/percentile",
            params={"lift_weight": 60, "body_weight": 81, "unit": "kg", "exercise": "squat-barbell"},
        )
        # ratio below the first threshold of 0.75 scales onto 0-10
        self.assertAlmostEqual(response.json()["percentile"], (60 / 81) / 0.75 * 10)

    def test_tiers(self) -> None:
        data = self.client.get("/tiers/25").json()
        self.assertEqual(data["tier"], "C-")
        self.assertEqual(data["next_tier"], "C")
        self.assertEqual(data["needed"], 6)
        self.assertEqual(data["level"], "Intermediate")
        top = self.client.get("/tiers/99").json()
        self.assertIsNone(top["next_tier"])
        self.assertEqual(self.client.get("/tiers/120").status_code, 400)

    def test_profile_and_recommendation(self) -> None:
        self.assertEqual(self.client.get("/recommendations/squat-barbell").json()["weight"], 0)
        profile = UserProfile(weight=180, lifts=[UserLift(id="squat-barbell", weight=225, reps=5)])
        response = self.client.put("/profile", json=profile.model_dump(mode="json"))
        self.assertEqual(response.status_code, 200)
        response = self.client.get("/recommendations/squat-barbell", params={"target_reps": "5"})
        self.assertEqual(response.json(), {"lift_id": "squat-barbell", "weight": 225})
        progress = self.client.get("/progress").json()
        self.assertEqual(progress["lifts"][0]["workout_id"], "squat-barbell")
        self.assertGreater(progress["overall_percentile"], 0)


class SessionAPITestCase(unittest.TestCase):
    def setUp(self) -> None:
        settings = SettingsSchema(rest_timer_seconds=60)
        self.client = TestClient(LiftAPI(settings).app)

    def start(self) -> dict:
        response = self.client.post("/session", json={"workout": WORKOUT})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_start_requires_workout(self) -> None:
        self.assertEqual(self.client.post("/session", json={}).status_code, 400)
        response = self.client.post("/session", json={"workout_id": "missing"})
        self.assertEqual(response.status_code, 404)

    def test_start_by_id_after_registration(self) -> None:
        self.start()
        self.client.post("/session/cancel")
        data = self.client.post("/session", json={"workout_id": "legs"}).json()
        self.assertEqual(data["status"], "in_progress")

    def test_set_lifecycle(self) -> None:
        data = self.start()
        self.assertEqual(data["status"], "in_progress")
        self.assertEqual(data["session"]["exercises"][0]["status"], "pending")
        data = self.client.post("/session/sets", json={"weight": 135, "reps": 8}).json()
        first = data["session"]["exercises"][0]
        self.assertEqual(first["completed_sets"][0]["set_number"], 1)
        self.assertEqual(first["status"], "in_progress")
        self.assertGreaterEqual(data["rest_seconds_remaining"], 59)
        data = self.client.put("/session/sets/0", json={"weight": 140, "reps": 8}).json()
        self.assertEqual(data["session"]["exercises"][0]["completed_sets"][0]["weight"], 140)

    def test_concurrent_sets_all_recorded(self) -> None:
        self.start()
        with ThreadPoolExecutor(max_workers=5) as pool:
            responses = list(
                pool.map(
                    lambda _: self.client.post("/session/sets", json={"weight": 100, "reps": 5}),
                    range(5),
                )
            )
        self.assertEqual([r.status_code for r in responses], [200] * 5)
        sets = self.client.get("/session").json()["session"]["exercises"][0]["completed_sets"]
        self.assertEqual(sorted(s["set_number"] for s in sets), [1, 2, 3, 4, 5])

    def test_error_mapping(self) -> None:
        self.assertEqual(self.client.post("/session/sets", json={"weight": 100, "reps": 5}).status_code, 409)
        self.start()
        self.assertEqual(self.client.post("/session", json={"workout": WORKOUT}).status_code, 409)
        self.assertEqual(self.client.post("/session/sets", json={"weight": 0, "reps": 5}).status_code, 400)
        self.assertEqual(self.client.put("/session/sets/4", json={"weight": 100, "reps": 5}).status_code, 404)
        self.assertEqual(self.client.post("/session/exercises/9/jump").status_code, 404)

    def test_navigation_and_finish(self) -> None:
        self.start()
        self.client.post("/session/sets", json={"weight": 135, "reps": 8})
        self.client.post("/session/sets", json={"weight": 145, "reps": 6})
        moved = self.client.post("/session/next").json()
        self.assertTrue(moved["moved"])
        self.client.post("/session/sets/skip")
        self.assertFalse(self.client.post("/session/next").json()["moved"])
        data = self.client.post("/session/exercises/0/jump").json()
        self.assertEqual(data["session"]["current_exercise_index"], 0)
        result = self.client.post("/session/finish").json()
        self.assertEqual(result["status"], "finished")
        self.assertEqual(result["stats"]["total_sets"], 3)
        self.assertEqual(result["stats"]["total_volume"], 1950)
        self.assertEqual(len(result["personal_records"]), 1)
        self.assertEqual(self.client.post("/session/finish").status_code, 409)

    def test_cancel(self) -> None:
        self.start()
        data = self.client.post("/session/cancel").json()
        self.assertEqual(data["status"], "cancelled")
        self.assertIsNone(data["session"])


if __name__ == "__main__":
    unittest.main()
