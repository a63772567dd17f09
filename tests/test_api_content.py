import pytest

SKILL = {
    "category": "Backend",
    "title": "Services",
    "icon": "Server",
    "items": ["FastAPI", "PostgreSQL"],
    "specializations": ["APIs"],
}


class TestAdminAuth:
    def test_login_sets_httponly_cookie(self, client):
        response = client.post("/api/admin/login", json={"password": "letmein"})

        assert response.status_code == 200
        assert "token" in client.cookies
        assert "httponly" in response.headers["set-cookie"].lower()
        assert client.get("/api/admin/check").json() == {"authenticated": True}

    def test_wrong_password_is_401(self, client):
        response = client.post("/api/admin/login", json={"password": "nope"})

        assert response.status_code == 401
        assert client.get("/api/admin/check").json() == {"authenticated": False}

    def test_logout_clears_session(self, admin_client):
        admin_client.post("/api/admin/logout")

        assert admin_client.get("/api/admin/check").json() == {"authenticated": False}

    def test_writes_require_admin(self, client):
        assert client.post("/api/skills", json=SKILL).status_code == 401
        client.cookies.set("token", "forged.token.value")
        assert client.post("/api/skills", json=SKILL).status_code == 401
        assert client.get("/api/admin/chat/context-docs").status_code == 401


class TestResources:
    def test_skill_crud(self, admin_client):
        created = admin_client.post("/api/skills", json=SKILL)
        assert created.status_code == 201
        skill_id = created.json()["id"]

        patched = admin_client.patch(f"/api/skills/{skill_id}", json={"title": "Platform"})
        assert patched.status_code == 200
        assert patched.json()["title"] == "Platform"
        assert patched.json()["items"] == ["FastAPI", "PostgreSQL"]

        listed = admin_client.get("/api/skills").json()
        assert [s["title"] for s in listed] == ["Platform"]

        assert admin_client.delete(f"/api/skills/{skill_id}").status_code == 204
        assert admin_client.get("/api/skills").json() == []
        assert admin_client.delete(f"/api/skills/{skill_id}").status_code == 404

    def test_unknown_icon_is_rejected(self, admin_client):
        response = admin_client.post("/api/skills", json={**SKILL, "icon": "Rocket"})

        assert response.status_code == 422

    def test_unknown_field_is_rejected(self, admin_client):
        response = admin_client.post("/api/skills", json={**SKILL, "owner": "mallory"})

        assert response.status_code == 422

    def test_patent_status_is_closed(self, admin_client):
        patent = {"number": "US1", "title": "Widget", "year": "2020", "company": "Acme", "status": "Pending"}

        assert admin_client.post("/api/patents", json=patent).status_code == 422
        assert admin_client.post("/api/patents", json={**patent, "status": "Awarded"}).status_code == 201

    def test_patch_missing_record_is_404(self, admin_client):
        response = admin_client.patch("/api/companies/00000000-0000-0000-0000-000000000000", json={"name": "X"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Company not found"}

    def test_null_for_required_column_is_422(self, admin_client):
        patent = {"number": "US1", "title": "Widget", "year": "2020", "company": "Acme", "status": "Awarded"}
        patent_id = admin_client.post("/api/patents", json=patent).json()["id"]

        response = admin_client.patch(f"/api/patents/{patent_id}", json={"title": None})

        assert response.status_code == 422
        assert admin_client.get("/api/patents").json()[0]["title"] == "Widget"

    def test_null_for_optional_column_clears_it(self, admin_client):
        company_id = admin_client.post("/api/companies", json={"name": "Acme", "logo_url": "https://cdn.example.com/acme.png"}).json()["id"]

        patched = admin_client.patch(f"/api/companies/{company_id}", json={"logo_url": None})

        assert patched.status_code == 200
        assert patched.json()["logo_url"] is None

    def test_featured_projects_filter(self, admin_client):
        base = {"company": "Acme", "description": "d", "icon": "Zap"}
        admin_client.post("/api/projects", json={**base, "title": "Hero", "featured": True})
        admin_client.post("/api/projects", json={**base, "title": "Side"})

        assert [p["title"] for p in admin_client.get("/api/projects?featured=true").json()] == ["Hero"]
        assert len(admin_client.get("/api/projects").json()) == 2

    def test_public_paths(self, admin_client):
        admin_client.post("/api/consulting/testimonials", json={"author": "Sam", "quote": "Great work"})
        admin_client.post("/api/admin/media-assets", json={"url": "https://cdn.example.com/a.png"})

        assert admin_client.get("/api/consulting/testimonials").json()[0]["author"] == "Sam"
        assert admin_client.get("/api/media-assets").json()[0]["kind"] == "image"

    def test_chat_content_admin_routes(self, admin_client):
        doc = admin_client.post("/api/admin/chat/context-docs", json={"label": "Talks", "body": "PyCon 2024"})
        prompt = admin_client.post("/api/admin/chat/prompts", json={"prompt": "What do you build?"})

        assert doc.status_code == 201
        assert prompt.status_code == 201
        assert [d["label"] for d in admin_client.get("/api/admin/chat/context-docs").json()] == ["Talks"]
        assert admin_client.get("/api/chat/prompts").json() == ["What do you build?"]


class TestProfile:
    def test_profile_lifecycle(self, admin_client):
        assert admin_client.get("/api/profile").json() is None

        created = admin_client.post("/api/profile", json={"name": "Jane Doe", "title": "Engineer"}).json()
        admin_client.patch(f"/api/profile/{created['id']}", json={"location": "Berlin"})

        profile = admin_client.get("/api/profile").json()
        assert profile["name"] == "Jane Doe"
        assert profile["location"] == "Berlin"


class TestBlog:
    def test_slug_and_visibility(self, admin_client):
        draft = admin_client.post("/api/blog-posts", json={"title": "Hello World", "content": "<p>draft</p>"}).json()
        published = admin_client.post(
            "/api/blog-posts", json={"title": "Hello World", "content": "<p>live</p>", "status": "published"}
        ).json()

        assert draft["slug"] == "hello-world"
        assert published["slug"] == "hello-world-2"
        assert published["published_at"] is not None
        assert [p["slug"] for p in admin_client.get("/api/blog-posts").json()] == ["hello-world-2"]
        assert admin_client.get("/api/blog-posts/hello-world").status_code == 404
        assert admin_client.get("/api/blog-posts/hello-world-2").json()["content"] == "<p>live</p>"
        assert len(admin_client.get("/api/blog-posts/all").json()) == 2

    def test_publishing_a_draft_stamps_date(self, admin_client):
        draft = admin_client.post("/api/blog-posts", json={"title": "Notes", "content": "x"}).json()
        assert draft["published_at"] is None

        updated = admin_client.patch(f"/api/blog-posts/{draft['id']}", json={"status": "published"}).json()

        assert updated["published_at"] is not None
        assert admin_client.get("/api/blog-posts/notes").status_code == 200

    def test_delete_post(self, admin_client):
        post = admin_client.post("/api/blog-posts", json={"title": "Gone", "content": "x"}).json()

        assert admin_client.delete(f"/api/blog-posts/{post['id']}").status_code == 204
        assert admin_client.delete(f"/api/blog-posts/{post['id']}").status_code == 404

    @pytest.mark.parametrize("slug", ["", None])
    def test_blank_slug_patch_is_422(self, admin_client, slug):
        post = admin_client.post("/api/blog-posts", json={"title": "Kept", "content": "x", "status": "published"}).json()

        response = admin_client.patch(f"/api/blog-posts/{post['id']}", json={"slug": slug})

        assert response.status_code == 422
        assert admin_client.get("/api/blog-posts/kept").status_code == 200
