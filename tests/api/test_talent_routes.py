"""Talent endpoints: registration with CV upload, listing, update, delete."""

import shutil

import pytest

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"

pytestmark = pytest.mark.api


class TestRegister:

    def test_new_talent_with_pdf(self, client, register_talent, upload_dir, notifier):
        response = register_talent()

        assert response.status_code == 200
        body = response.json()
        assert body["fullName"] == "Ada Lovelace"
        assert body["email"] == "ada@example.com"
        assert body["status"] == "lead"
        assert body["cvPath"].startswith("/uploads/")
        assert body["cvPath"].endswith(".pdf")
        assert "createdAt" in body

        stored_name = body["cvPath"].rsplit("/", 1)[1]
        assert (upload_dir / stored_name).read_bytes() == PDF_BYTES
        assert notifier.sent == [("talent", "Ada Lovelace", "ada@example.com")]

    def test_uploaded_cv_is_served(self, client, register_talent):
        cv_path = register_talent().json()["cvPath"]

        response = client.get(cv_path)

        assert response.status_code == 200
        assert response.content == PDF_BYTES

    def test_cv_is_optional(self, client, register_talent, upload_dir):
        response = register_talent(cv=None)

        assert response.status_code == 200
        assert response.json()["cvPath"] is None
        assert list(upload_dir.iterdir()) == []

    def test_duplicate_email(self, client, register_talent, notifier):
        register_talent()

        response = register_talent(full_name="Impostor")

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"
        assert len(client.get("/api/talents").json()) == 1
        assert len(notifier.sent) == 1

    def test_non_pdf_rejected_before_any_write(self, client, register_talent, upload_dir, notifier):
        response = register_talent(cv=("cv.docx", b"PK\x03\x04", "application/msword"))

        assert response.status_code == 400
        assert response.json()["detail"] == "Only PDF files are allowed"
        assert list(upload_dir.iterdir()) == []
        assert client.get("/api/talents").json() == []
        assert notifier.sent == []

    def test_oversized_pdf_rejected(self, client, register_talent, upload_dir):
        too_big = b"%PDF" + b"0" * (5 * 1024 * 1024)

        response = register_talent(cv=("big.pdf", too_big, "application/pdf"))

        assert response.status_code == 400
        assert "too large" in response.json()["detail"]
        assert list(upload_dir.iterdir()) == []
        assert client.get("/api/talents").json() == []

    def test_unwritable_upload_dir_gives_generic_500(self, client, register_talent, upload_dir, notifier):
        shutil.rmtree(upload_dir)

        response = register_talent()

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"detail": "Internal server error"}
        assert client.get("/api/talents").json() == []
        assert notifier.sent == []

    @pytest.mark.parametrize("missing", ["fullName", "email", "phone"])
    def test_missing_field(self, client, missing):
        data = {"fullName": "Ada", "email": "ada@example.com", "phone": "1"}
        del data[missing]

        response = client.post("/api/talents", data=data)

        assert response.status_code == 400
        assert missing in [e["field"] for e in response.json()["errors"]]

    def test_invalid_email(self, client):
        response = client.post("/api/talents", data={"fullName": "Ada", "email": "nope", "phone": "1"})

        assert response.status_code == 400


class TestListUpdateDelete:

    def test_list_newest_first(self, client, register_talent):
        for i in range(3):
            register_talent(full_name=f"Talent {i}", email=f"t{i}@example.com")

        names = [t["fullName"] for t in client.get("/api/talents").json()]

        assert names == ["Talent 2", "Talent 1", "Talent 0"]

    def test_list_exposes_public_cv_path(self, client, register_talent):
        created = register_talent().json()

        listed = client.get("/api/talents").json()[0]

        assert listed["cvPath"] == created["cvPath"]

    def test_status_update_changes_only_status(self, client, register_talent):
        created = register_talent().json()

        response = client.put(f"/api/talents/{created['id']}", json={"status": "client"})

        assert response.status_code == 200
        listed = client.get("/api/talents").json()[0]
        assert listed["status"] == "client"
        for field in ("id", "fullName", "email", "phone", "cvPath", "createdAt"):
            assert listed[field] == created[field]

    def test_update_contact_fields(self, client, register_talent):
        created = register_talent().json()

        response = client.put(f"/api/talents/{created['id']}", json={"phone": "999", "fullName": "Ada King"})

        assert response.json()["phone"] == "999"
        assert response.json()["fullName"] == "Ada King"
        assert response.json()["status"] == "lead"

    def test_update_ignores_created_at(self, client, register_talent):
        created = register_talent().json()

        response = client.put(
            f"/api/talents/{created['id']}",
            json={"status": "contacted", "createdAt": "2000-01-01T00:00:00"},
        )

        assert response.json()["createdAt"] == created["createdAt"]

    def test_invalid_status(self, client, register_talent):
        created = register_talent().json()

        response = client.put(f"/api/talents/{created['id']}", json={"status": "hired"})

        assert response.status_code == 400
        assert client.get("/api/talents").json()[0]["status"] == "lead"

    def test_empty_update(self, client, register_talent):
        created = register_talent().json()

        response = client.put(f"/api/talents/{created['id']}", json={})

        assert response.status_code == 400

    def test_update_missing(self, client):
        response = client.put("/api/talents/404", json={"status": "contacted"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Talent not found"

    def test_delete(self, client, register_talent, upload_dir):
        created = register_talent().json()

        response = client.delete(f"/api/talents/{created['id']}")

        assert response.status_code == 200
        assert response.json()["email"] == "ada@example.com"
        assert client.get("/api/talents").json() == []
        # uploads are never cleaned up
        assert len(list(upload_dir.iterdir())) == 1

    def test_delete_missing(self, client):
        assert client.delete("/api/talents/404").status_code == 404
