"""Endpoint tests for settings, documents and media, plus request logging."""
import logging
import uuid

SETTINGS = "/api/v1/settings"


def _setting(client, headers, key, is_public, group="general"):
    response = client.post(
        SETTINGS,
        json={"setting_key": key, "setting_value": "x", "setting_group": group, "is_public": is_public},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_public_scope_for_non_admins(client, admin, staff, client_user, auth):
    headers = auth(admin)
    _setting(client, headers, "site.name", True)
    _setting(client, headers, "site.logo", True)
    _setting(client, headers, "smtp.password", False, group="mail")

    assert client.get(SETTINGS, headers=headers).json()["meta"]["total"] == 3
    for principal in (staff, client_user):
        body = client.get(SETTINGS, headers=auth(principal)).json()
        assert body["meta"]["total"] == 2
        assert all(s["is_public"] for s in body["data"])


def test_non_admin_cannot_see_private_even_when_asking(client, admin, staff, auth):
    _setting(client, auth(admin), "smtp.password", False)

    body = client.get(SETTINGS, params={"is_public": "false"}, headers=auth(staff)).json()

    assert body["meta"]["total"] == 0


def test_key_filter_and_lookup(client, admin, client_user, auth):
    headers = auth(admin)
    _setting(client, headers, "site.name", True)
    _setting(client, headers, "smtp.host", False, group="mail")

    body = client.get(SETTINGS, params={"key": "SMTP", "group": "mail"}, headers=headers).json()
    assert [s["setting_key"] for s in body["data"]] == ["smtp.host"]

    assert client.get(f"{SETTINGS}/key/site.name", headers=auth(client_user)).status_code == 200
    assert client.get(f"{SETTINGS}/key/smtp.host", headers=auth(client_user)).status_code == 403
    assert client.get(f"{SETTINGS}/key/nope", headers=headers).status_code == 404


def test_duplicate_key_conflicts(client, admin, auth):
    _setting(client, auth(admin), "site.name", True)

    response = client.post(
        SETTINGS, json={"setting_key": "site.name", "setting_group": "general"}, headers=auth(admin)
    )

    assert response.status_code == 409


def test_staff_cannot_write_settings(client, staff, auth):
    response = client.post(SETTINGS, json={"setting_key": "k", "setting_group": "g"}, headers=auth(staff))
    assert response.status_code == 403


def test_documents_and_media_attach_to_existing_owner(client, admin, staff, client_user, auth):
    project = client.post(
        "/api/v1/projects",
        json={"project_code": "P-1", "title": "Library", "project_type": "RENOVATION"},
        headers=auth(admin),
    ).json()

    document = client.post(
        "/api/v1/documents",
        json={"documentable_type": "projects", "documentable_id": project["id"], "document_type": "CONTRACT",
              "file_name": "contract.pdf", "file_path": "projects/P-1/contract.pdf"},
        headers=auth(staff),
    )
    assert document.status_code == 201, document.text

    media = client.post(
        "/api/v1/media",
        json={"mediable_type": "projects", "mediable_id": project["id"], "title": "Site Photo North",
              "file_name": "north.jpg", "file_path": "projects/P-1/north.jpg"},
        headers=auth(staff),
    )
    assert media.status_code == 201, media.text

    docs = client.get("/api/v1/documents", params={"documentable_id": project["id"]}, headers=auth(staff)).json()
    assert docs["meta"]["total"] == 1
    photos = client.get("/api/v1/media", params={"title": "photo"}, headers=auth(staff)).json()
    assert photos["meta"]["total"] == 1

    assert client.get("/api/v1/documents", headers=auth(client_user)).status_code == 403

    orphan = client.post(
        "/api/v1/documents",
        json={"documentable_type": "contractors", "documentable_id": str(uuid.uuid4()),
              "file_name": "a.pdf", "file_path": "a.pdf"},
        headers=auth(staff),
    )
    assert orphan.status_code == 404


def test_requests_are_logged(client, admin, auth, caplog):
    with caplog.at_level(logging.INFO, logger="pmo.http"):
        client.get(SETTINGS, headers=auth(admin))

    records = [r for r in caplog.records if r.name == "pmo.http"]
    assert records
    record = records[-1]
    assert record.http["method"] == "GET"
    assert record.http["path"] == SETTINGS
    assert record.http["statusCode"] == 200
    assert record.http["userId"] == str(admin.id)
    assert f"[User: {str(admin.id)[:8]}...]" in record.getMessage()
