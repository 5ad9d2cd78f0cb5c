"""Integration tests for study plans, subjects and academic periods."""

import unittest

from tests.support import API, ApiTestCase

PLANES = f"{API}/planes"
MATERIAS = f"{API}/materias"
PERIODOS = f"{API}/periodos"


class TestPlanes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def _create(self, nombre: str = "Bachillerato 2024", anio: int = 2024) -> int:
        response = self.client.post(
            PLANES, json={"nombre_plan": nombre, "anio_inicio": anio}, headers=self.headers
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["id"]

    def test_create_get_update(self) -> None:
        plan_id = self._create()
        response = self.client.put(
            f"{PLANES}/{plan_id}", json={"anio_inicio": 2025}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        plan = self.client.get(f"{PLANES}/{plan_id}", headers=self.headers).json()["plan"]
        self.assertEqual(plan["nombre_plan"], "Bachillerato 2024")
        self.assertEqual(plan["anio_inicio"], 2025)
        self.assertTrue(plan["estado"])

    def test_inactivate_and_reactivate(self) -> None:
        plan_id = self._create()
        self.client.put(f"{PLANES}/{plan_id}/inactivar", headers=self.headers)
        plan = self.client.get(f"{PLANES}/{plan_id}", headers=self.headers).json()["plan"]
        self.assertFalse(plan["estado"])
        self.client.put(f"{PLANES}/{plan_id}/reactivar", headers=self.headers)
        plan = self.client.get(f"{PLANES}/{plan_id}", headers=self.headers).json()["plan"]
        self.assertTrue(plan["estado"])

    def test_list_includes_inactive(self) -> None:
        self._create("B")
        inactive_id = self._create("A")
        self.client.put(f"{PLANES}/{inactive_id}/inactivar", headers=self.headers)
        planes = self.client.get(PLANES, headers=self.headers).json()["planes"]
        self.assertEqual([p["nombre_plan"] for p in planes], ["A", "B"])

    def test_unknown_plan_is_404(self) -> None:
        response = self.client.get(f"{PLANES}/42", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Plan no encontrado")


class TestMaterias(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()
        self.plan_id = self.client.post(
            PLANES, json={"nombre_plan": "Plan 2024", "anio_inicio": 2024}, headers=self.headers
        ).json()["id"]

    def _create(self, codigo: str = "MAT-101", **overrides):
        payload = {"codigo": codigo, "nombre": "Matemática I", "creditos": 4, "plan_id": self.plan_id}
        payload.update(overrides)
        return self.client.post(MATERIAS, json=payload, headers=self.headers)

    def test_create_and_get_by_code(self) -> None:
        self.assertEqual(self._create().status_code, 201)
        response = self.client.get(f"{MATERIAS}/MAT-101", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        materia = response.json()["materia"]
        self.assertEqual(materia["nombre"], "Matemática I")
        self.assertEqual(materia["nombre_plan"], "Plan 2024")
        self.assertTrue(materia["estado"])

    def test_duplicate_code_is_400(self) -> None:
        self._create()
        response = self._create(nombre="Otra")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Código de materia ya registrado")

    def test_unknown_plan_is_404(self) -> None:
        self.assertEqual(self._create(plan_id=999).status_code, 404)

    def test_without_plan(self) -> None:
        self.assertEqual(self._create(plan_id=None).status_code, 201)
        materia = self.client.get(f"{MATERIAS}/MAT-101", headers=self.headers).json()["materia"]
        self.assertIsNone(materia["plan_id"])
        self.assertIsNone(materia["nombre_plan"])

    def test_unknown_code_is_404(self) -> None:
        response = self.client.get(f"{MATERIAS}/NOPE", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Materia no encontrada")

    def test_update(self) -> None:
        self._create()
        response = self.client.put(
            f"{MATERIAS}/MAT-101", json={"creditos": 5}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        materia = self.client.get(f"{MATERIAS}/MAT-101", headers=self.headers).json()["materia"]
        self.assertEqual(materia["creditos"], 5)
        self.assertEqual(materia["plan_id"], self.plan_id)

    def test_estado_toggle(self) -> None:
        self._create()
        response = self.client.put(
            f"{MATERIAS}/MAT-101/estado", json={"activo": False}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Materia desactivada")
        materia = self.client.get(f"{MATERIAS}/MAT-101", headers=self.headers).json()["materia"]
        self.assertFalse(materia["estado"])

    def test_estado_requires_boolean(self) -> None:
        self._create()
        for payload in ({"activo": "true"}, {"activo": 1}, {}):
            with self.subTest(payload=payload):
                response = self.client.put(
                    f"{MATERIAS}/MAT-101/estado", json=payload, headers=self.headers
                )
                self.assertEqual(response.status_code, 400)
                self.assertFalse(response.json()["success"])

    def test_delete_is_soft(self) -> None:
        self._create()
        self.assertEqual(self.client.delete(f"{MATERIAS}/MAT-101", headers=self.headers).status_code, 200)
        materias = self.client.get(MATERIAS, headers=self.headers).json()["materias"]
        self.assertEqual(len(materias), 1)
        self.assertFalse(materias[0]["estado"])


class TestPeriodos(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def _create(self, nombre: str, anio: int, **extra):
        payload = {"nombre": nombre, "anio": anio}
        payload.update(extra)
        return self.client.post(PERIODOS, json=payload, headers=self.headers)

    def test_listing_order(self) -> None:
        for nombre, anio in (
            ("Verano", 2024),
            ("Segundo Semestre", 2024),
            ("Intensivo", 2025),
            ("Primer Semestre", 2024),
            ("Primer Semestre", 2025),
        ):
            self.assertEqual(self._create(nombre, anio).status_code, 201)
        periodos = self.client.get(PERIODOS, headers=self.headers).json()["periodos"]
        self.assertEqual(
            [(p["nombre"], p["anio"]) for p in periodos],
            [
                ("Primer Semestre", 2025),
                ("Intensivo", 2025),
                ("Primer Semestre", 2024),
                ("Segundo Semestre", 2024),
                ("Verano", 2024),
            ],
        )

    def test_dates_out_of_order_on_create_is_400(self) -> None:
        response = self._create(
            "Primer Semestre", 2025, fecha_inicio="2025-07-01", fecha_fin="2025-02-01"
        )
        self.assertEqual(response.status_code, 400)

    def test_dates_out_of_order_on_update_is_400(self) -> None:
        periodo_id = self._create(
            "Primer Semestre", 2025, fecha_inicio="2025-02-01", fecha_fin="2025-07-01"
        ).json()["id"]
        response = self.client.put(
            f"{PERIODOS}/{periodo_id}", json={"fecha_fin": "2025-01-01"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        ok = self.client.put(
            f"{PERIODOS}/{periodo_id}", json={"fecha_fin": "2025-06-30"}, headers=self.headers
        )
        self.assertEqual(ok.status_code, 200)
        periodo = self.client.get(f"{PERIODOS}/{periodo_id}", headers=self.headers).json()["periodo"]
        self.assertEqual(periodo["fecha_fin"], "2025-06-30")

    def test_unknown_periodo_is_404(self) -> None:
        self.assertEqual(self.client.get(f"{PERIODOS}/7", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
