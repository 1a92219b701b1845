import jwt

from config.settings import settings
from helpers.token_helper import create_access_token

URL = "/api/v1/blogs"
PAYLOAD = {"title": "t", "content": "c"}


def test_missing_token(client):
    resp = client.post(URL, json=PAYLOAD)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"


def test_garbage_token(client):
    resp = client.post(URL, json=PAYLOAD, headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_token_signed_with_other_key(client, make_user):
    user_id, _ = make_user("author")
    token = jwt.encode({"id": user_id}, "another-secret-key-of-sufficient-length", algorithm=settings.ALGORITHM)
    resp = client.post(URL, json=PAYLOAD, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_expired_token(client, make_user):
    user_id, _ = make_user("author")
    token = create_access_token({"id": user_id}, expires_minutes=-5)
    resp = client.post(URL, json=PAYLOAD, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token has expired"


def test_token_without_user_id(client):
    token = create_access_token({"email": "nobody@example.com"})
    resp = client.post(URL, json=PAYLOAD, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_token_for_deleted_user(client):
    token = create_access_token({"id": 4242})
    resp = client.post(URL, json=PAYLOAD, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404


def test_role_is_read_from_database(client, make_user, session_factory):
    from api.roles.roles_model import UserRole

    user_id, headers = make_user("author")
    blog = client.post(URL, json=PAYLOAD, headers=headers).json()["blog"]
    assert client.patch(f"{URL}/{blog['id']}/feature", json={"featured": True}, headers=headers).status_code == 403

    with session_factory() as db:
        db.query(UserRole).filter_by(user_id=user_id).update({"role": UserRole.ADMIN})
        db.commit()

    resp = client.patch(f"{URL}/{blog['id']}/feature", json={"featured": True}, headers=headers)
    assert resp.status_code == 200
    # admin featuring their own blog
    assert resp.json()["points_awarded"] == 0


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
