"""Integration tests for students and teachers."""

import unittest

from tests.support import API, ApiTestCase

ESTUDIANTES = f"{API}/estudiantes"
PROFESORES = f"{API}/profesores"


class TestEstudiantes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def _create(self, cedula: str = "1-1111-1111", nombre: str = "María Rojas", **extra):
        payload = {"cedula": cedula, "nombre": nombre, "fecha_nacimiento": "2008-05-14"}
        payload.update(extra)
        return self.client.post(ESTUDIANTES, json=payload, headers=self.headers)

    def test_create_and_get(self) -> None:
        response = self._create(correo="maria@correo.com")
        self.assertEqual(response.status_code, 201)
        estudiante_id = response.json()["id"]
        estudiante = self.client.get(
            f"{ESTUDIANTES}/{estudiante_id}", headers=self.headers
        ).json()["estudiante"]
        self.assertEqual(estudiante["cedula"], "1-1111-1111")
        self.assertEqual(estudiante["fecha_nacimiento"], "2008-05-14")
        self.assertEqual(estudiante["correo"], "maria@correo.com")
        self.assertTrue(estudiante["estado"])

    def test_duplicate_cedula_is_400(self) -> None:
        self._create()
        response = self._create(cedula=" 1-1111-1111 ", nombre="Otra")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Cédula ya registrada")

    def test_verificar_cedula(self) -> None:
        self._create()
        found = self.client.get(
            f"{ESTUDIANTES}/verificar-cedula", params={"cedula": "1-1111-1111"}, headers=self.headers
        )
        self.assertEqual(found.status_code, 200)
        self.assertTrue(found.json()["existe"])
        missing = self.client.get(
            f"{ESTUDIANTES}/verificar-cedula", params={"cedula": "9-9999-9999"}, headers=self.headers
        )
        self.assertFalse(missing.json()["existe"])

    def test_verificar_cedula_requires_value(self) -> None:
        response = self.client.get(f"{ESTUDIANTES}/verificar-cedula", headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_inactivate_lists_and_reactivate(self) -> None:
        estudiante_id = self._create().json()["id"]
        self._create(cedula="2-2222-2222", nombre="Ana Solís")
        self.assertEqual(
            self.client.delete(f"{ESTUDIANTES}/{estudiante_id}", headers=self.headers).status_code, 200
        )
        activos = self.client.get(ESTUDIANTES, headers=self.headers).json()["estudiantes"]
        inactivos = self.client.get(f"{ESTUDIANTES}/inactivos", headers=self.headers).json()["estudiantes"]
        self.assertEqual([e["nombre"] for e in activos], ["Ana Solís"])
        self.assertEqual([e["estudiante_id"] for e in inactivos], [estudiante_id])

        self.client.put(f"{ESTUDIANTES}/{estudiante_id}/reactivar", headers=self.headers)
        activos = self.client.get(ESTUDIANTES, headers=self.headers).json()["estudiantes"]
        self.assertEqual([e["nombre"] for e in activos], ["Ana Solís", "María Rojas"])

    def test_inactive_cedula_still_counts_as_taken(self) -> None:
        estudiante_id = self._create().json()["id"]
        self.client.delete(f"{ESTUDIANTES}/{estudiante_id}", headers=self.headers)
        self.assertEqual(self._create().status_code, 400)

    def test_update(self) -> None:
        estudiante_id = self._create().json()["id"]
        other_id = self._create(cedula="2-2222-2222").json()["id"]
        response = self.client.put(
            f"{ESTUDIANTES}/{estudiante_id}", json={"telefono": "8888-0000"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        clash = self.client.put(
            f"{ESTUDIANTES}/{other_id}", json={"cedula": "1-1111-1111"}, headers=self.headers
        )
        self.assertEqual(clash.status_code, 400)

    def test_unknown_is_404(self) -> None:
        response = self.client.get(f"{ESTUDIANTES}/123", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Estudiante no encontrado")

    def test_non_numeric_id_is_400(self) -> None:
        response = self.client.get(f"{ESTUDIANTES}/abc", headers=self.headers)
        self.assertEqual(response.status_code, 400)


class TestProfesores(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def test_crud_cycle(self) -> None:
        response = self.client.post(
            PROFESORES, json={"nombre": "Jorge Vargas", "correo": "jorge@colegio.edu"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 201)
        profesor_id = response.json()["id"]

        self.client.put(
            f"{PROFESORES}/{profesor_id}", json={"telefono": "2222-3333"}, headers=self.headers
        )
        profesor = self.client.get(f"{PROFESORES}/{profesor_id}", headers=self.headers).json()["profesor"]
        self.assertEqual(profesor["telefono"], "2222-3333")
        self.assertEqual(profesor["correo"], "jorge@colegio.edu")

        self.client.delete(f"{PROFESORES}/{profesor_id}", headers=self.headers)
        self.assertEqual(self.client.get(PROFESORES, headers=self.headers).json()["profesores"], [])
        inactivos = self.client.get(f"{PROFESORES}/inactivos", headers=self.headers).json()["profesores"]
        self.assertEqual(len(inactivos), 1)

        self.client.put(f"{PROFESORES}/{profesor_id}/reactivar", headers=self.headers)
        self.assertEqual(len(self.client.get(PROFESORES, headers=self.headers).json()["profesores"]), 1)

    def test_missing_name_is_400(self) -> None:
        response = self.client.post(PROFESORES, json={"correo": "x@y.z"}, headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Datos inválidos: nombre")


if __name__ == "__main__":
    unittest.main()
