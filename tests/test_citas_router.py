"""
Tests de los endpoints /api/v1/citas con TestClient.
"""

URL = "/api/v1/citas"


def payload(inicio="2030-03-04T09:00:00", fin="2030-03-04T10:00:00", **extra):
    data = {
        "cliente_id": 1,
        "odontologo_id": 1,
        "servicio_id": 1,
        "fecha_hora_inicio": inicio,
        "fecha_hora_fin": fin,
    }
    data.update(extra)
    return data


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_crear_y_obtener_cita(client):
    r = client.post(URL, json=payload())
    assert r.status_code == 201
    cita = r.json()
    assert cita["estado"] == "Pendiente"
    assert cita["cliente"]["nombres"] == "Ana"
    assert cita["odontologo"]["nombres"] == "Carla"
    assert cita["servicio"]["nombre"] == "Limpieza"

    r = client.get(f"{URL}/{cita['id']}")
    assert r.status_code == 200
    assert r.json()["fecha_hora_inicio"] == "2030-03-04T09:00:00"


def test_crear_con_offset_se_pasa_a_hora_local(client):
    # 13:00 UTC son las 09:00 en La Paz (UTC-4)
    r = client.post(URL, json=payload(inicio="2030-03-04T13:00:00Z", fin="2030-03-04T14:00:00Z"))
    assert r.status_code == 201
    assert r.json()["fecha_hora_inicio"] == "2030-03-04T09:00:00"


def test_crear_con_cliente_inexistente(client):
    r = client.post(URL, json=payload(cliente_id=99))
    assert r.status_code == 404
    assert r.json()["detail"] == "El cliente con ID 99 no existe"


def test_crear_fuera_de_horario(client):
    r = client.post(URL, json=payload(inicio="2030-03-04T13:00:00", fin="2030-03-04T15:00:00"))
    assert r.status_code == 409


def test_crear_solapada(client):
    assert client.post(URL, json=payload()).status_code == 201

    r = client.post(URL, json=payload(inicio="2030-03-04T09:30:00", fin="2030-03-04T10:30:00", cliente_id=2))
    assert r.status_code == 409
    assert "Horarios ocupados: De 04/03/2030 09:00:00 a 04/03/2030 10:00:00" in r.json()["detail"]


def test_crear_sin_campos_obligatorios(client):
    r = client.post(URL, json={"cliente_id": 1})
    assert r.status_code == 422


def test_listar_citas(client):
    client.post(URL, json=payload(inicio="2030-03-04T14:00:00", fin="2030-03-04T15:00:00"))
    client.post(URL, json=payload())

    r = client.get(URL)
    assert r.status_code == 200
    assert [c["fecha_hora_inicio"] for c in r.json()] == ["2030-03-04T09:00:00", "2030-03-04T14:00:00"]


def test_confirmar_cita(client):
    cita = client.post(URL, json=payload()).json()

    r = client.patch(f"{URL}/{cita['id']}", json={"estado": "Confirmado"})
    assert r.status_code == 200
    body = r.json()
    assert body["estado"] == "Confirmado"
    assert body["fecha_confirmacion"] is not None
    assert body["fecha_hora_inicio"] == cita["fecha_hora_inicio"]


def test_estado_invalido(client):
    cita = client.post(URL, json=payload()).json()
    r = client.patch(f"{URL}/{cita['id']}", json={"estado": "Cancelado"})
    assert r.status_code == 422


def test_actualizar_cita_inexistente(client):
    r = client.patch(f"{URL}/99", json={"estado": "Confirmado"})
    assert r.status_code == 404


def test_eliminar_cita(client):
    cita = client.post(URL, json=payload()).json()

    r = client.delete(f"{URL}/{cita['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == cita["id"]

    assert client.get(f"{URL}/{cita['id']}").status_code == 404
    assert client.get(URL).json() == []
    assert client.delete(f"{URL}/{cita['id']}").status_code == 404


def test_servicios_por_odontologo(client):
    r = client.get(f"{URL}/odontologos/1/servicios")
    assert r.status_code == 200
    assert [s["nombre"] for s in r.json()] == ["Limpieza", "Extracción"]

    assert client.get(f"{URL}/odontologos/2/servicios").json() == []
    assert client.get(f"{URL}/odontologos/99/servicios").status_code == 404


def test_cors_solo_frontend(client):
    from clinica_dental.core.config import settings

    r = client.options(
        URL,
        headers={"Origin": settings.frontend_origin, "Access-Control-Request-Method": "POST"},
    )
    assert r.headers["access-control-allow-origin"] == settings.frontend_origin

    r = client.options(
        URL,
        headers={"Origin": "https://otro-sitio.example", "Access-Control-Request-Method": "POST"},
    )
    assert "access-control-allow-origin" not in r.headers
