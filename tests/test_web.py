from contact_api.core.security import create_token
from contact_api.db.models.inquiry import Inquiry
from contact_api.web.routes import safe_next


def test_home_without_error_has_no_modal(client):
    r = client.get("/")

    assert r.status_code == 200
    assert "auth-error-modal" not in r.text


def test_home_renders_modal_for_auth_failed(client):
    r = client.get("/", params={"error": "auth_failed", "tab": "2"})

    assert r.status_code == 200
    assert 'data-error-code="auth_failed"' in r.text
    assert "로그인에 실패했습니다. 다시 시도해주세요." in r.text
    assert "닫기" in r.text and "다시 시도" in r.text
    # replaceState target drops only the error param
    assert '"http://testserver/?tab=2"' in r.text


def test_home_escapes_unknown_codes(client):
    r = client.get("/", params={"error": "<b>x</b>"})

    assert r.status_code == 200
    assert "<b>x</b>" not in r.text
    assert "로그인 중 오류가 발생했습니다. 다시 시도해주세요." in r.text


def test_callback_with_valid_token_sets_cookie(client, access_token):
    r = client.get("/auth/callback", params={"token": access_token}, follow_redirects=False)

    assert r.status_code == 303
    assert r.headers["location"] == "/"
    assert "access_token=" in r.headers["set-cookie"]


def test_callback_cookie_identifies_later_submissions(client, db, user, access_token):
    client.get("/auth/callback", params={"token": access_token}, follow_redirects=False)

    r = client.post("/contact", json={"email": "a@b.com", "message": "Following up on my order."})

    assert r.status_code == 201
    assert db.get(Inquiry, r.json()["data"]["id"]).user_id == user.id


def test_callback_honours_local_next(client, access_token):
    r = client.get(
        "/auth/callback",
        params={"token": access_token, "next": "/pricing?plan=pro"},
        follow_redirects=False,
    )
    assert r.headers["location"] == "/pricing?plan=pro"


def test_callback_with_bad_token_redirects_with_auth_failed(client):
    r = client.get("/auth/callback", params={"token": "garbage"}, follow_redirects=False)

    assert r.status_code == 303
    assert r.headers["location"] == "/?error=auth_failed"
    assert "set-cookie" not in r.headers


def test_callback_without_token_is_auth_failed(client):
    r = client.get("/auth/callback", follow_redirects=False)
    assert r.headers["location"] == "/?error=auth_failed"


def test_callback_for_missing_user_is_auth_failed(client):
    r = client.get("/auth/callback", params={"token": create_token(424242)}, follow_redirects=False)
    assert r.headers["location"] == "/?error=auth_failed"


def test_callback_crash_redirects_with_unexpected(client, monkeypatch):
    from contact_api.web import routes

    def crash(db, token):
        raise RuntimeError("identity backend down")

    monkeypatch.setattr(routes, "load_identity", crash)
    r = client.get("/auth/callback", params={"token": "whatever"}, follow_redirects=False)

    assert r.headers["location"] == "/?error=unexpected"


def test_callback_redirect_lands_on_modal(client):
    r = client.get("/auth/callback", params={"token": "garbage"})

    assert r.status_code == 200
    assert 'data-error-code="auth_failed"' in r.text


def test_safe_next():
    assert safe_next(None) == "/"
    assert safe_next("/tools") == "/tools"
    assert safe_next("https://evil.example/") == "/"
    assert safe_next("//evil.example/") == "/"
    assert safe_next("/auth/callback?token=x") == "/"
