import threading

import pytest

from api.blogs.blogs_model import Blog
from api.blogs.blogs_service import BlogService
from api.roles.roles_model import UserRole
from api.user.user_model import User
from api.user.user_points_model import UserPoints

BLOGS = "/api/v1/blogs"


def _points(client, user_id):
    resp = client.get(f"/api/v1/users/{user_id}/points")
    assert resp.status_code == 200
    return resp.json()["points"]


def _create_blog(client, headers, title="Weekend cleanup", content="Notes from the river bank"):
    resp = client.post(BLOGS, json={"title": title, "content": content}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def author(make_user):
    return make_user("author")


@pytest.fixture
def admin(make_user):
    return make_user("admin", role=UserRole.ADMIN)


def test_blog_creation_awards_diminish(client, author):
    author_id, headers = author
    awarded = [
        _create_blog(client, headers, title=f"Blog {i}")["points_awarded"]
        for i in range(5)
    ]
    assert awarded == [10, 10, 5, 0, 0]
    assert _points(client, author_id) == 25


def test_like_and_feature_flow(client, author, admin, make_user):
    author_id, author_headers = author
    admin_id, admin_headers = admin
    fan_id, fan_headers = make_user("fan")

    blogs = [_create_blog(client, author_headers, title=f"Blog {i}")["blog"] for i in range(3)]
    assert _points(client, author_id) == 25

    resp = client.post(f"{BLOGS}/{blogs[0]['id']}/like", headers=fan_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["points_awarded"] == 2
    assert body["liked_by_user"] is True
    assert body["likes_count"] == 1
    assert _points(client, author_id) == 27

    resp = client.patch(f"{BLOGS}/{blogs[1]['id']}/feature", json={"featured": True}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["points_awarded"] == 50
    assert resp.json()["blog"]["featured"] is True
    assert _points(client, author_id) == 77

    resp = client.patch(f"{BLOGS}/{blogs[1]['id']}/feature", json={"featured": True}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["points_awarded"] == 0
    assert _points(client, author_id) == 77


def test_feature_bonus_is_paid_once_per_blog(client, author, admin):
    author_id, author_headers = author
    _, admin_headers = admin
    blog = _create_blog(client, author_headers)["blog"]
    url = f"{BLOGS}/{blog['id']}/feature"

    assert client.patch(url, json={"featured": True}, headers=admin_headers).json()["points_awarded"] == 50
    resp = client.patch(url, json={"featured": False}, headers=admin_headers)
    assert resp.json()["points_awarded"] == 0
    assert resp.json()["blog"]["featured"] is False
    assert client.patch(url, json={"featured": True}, headers=admin_headers).json()["points_awarded"] == 0
    assert _points(client, author_id) == 60


def test_admin_featuring_own_blog_earns_nothing(client, admin):
    admin_id, admin_headers = admin
    blog = _create_blog(client, admin_headers)["blog"]

    resp = client.patch(f"{BLOGS}/{blog['id']}/feature", json={"featured": True}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["points_awarded"] == 0
    assert _points(client, admin_id) == 10


def test_feature_requires_admin(client, author):
    _, headers = author
    blog = _create_blog(client, headers)["blog"]
    resp = client.patch(f"{BLOGS}/{blog['id']}/feature", json={"featured": True}, headers=headers)
    assert resp.status_code == 403


def test_feature_rejects_non_boolean(client, author, admin):
    _, headers = author
    _, admin_headers = admin
    blog = _create_blog(client, headers)["blog"]
    resp = client.patch(f"{BLOGS}/{blog['id']}/feature", json={"featured": "yes"}, headers=admin_headers)
    assert resp.status_code == 422


def test_duplicate_like_is_rejected(client, author, make_user):
    author_id, headers = author
    _, fan_headers = make_user("fan")
    blog = _create_blog(client, headers)["blog"]

    assert client.post(f"{BLOGS}/{blog['id']}/like", headers=fan_headers).status_code == 200
    resp = client.post(f"{BLOGS}/{blog['id']}/like", headers=fan_headers)
    assert resp.status_code == 400
    assert _points(client, author_id) == 12


def test_self_like_is_logged_without_points(client, author):
    author_id, headers = author
    blog = _create_blog(client, headers)["blog"]

    resp = client.post(f"{BLOGS}/{blog['id']}/like", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["points_awarded"] == 0
    assert resp.json()["likes_count"] == 1
    assert _points(client, author_id) == 10

    log = client.get(f"/api/v1/users/{author_id}/points/log", headers=headers).json()
    assert [(e["action_type"], e["points_awarded"]) for e in log["entries"]] == [
        ("like_received", 0),
        ("blog_created", 10),
    ]


def test_unlike_keeps_points(client, author, make_user):
    author_id, headers = author
    _, fan_headers = make_user("fan")
    blog = _create_blog(client, headers)["blog"]
    client.post(f"{BLOGS}/{blog['id']}/like", headers=fan_headers)

    resp = client.delete(f"{BLOGS}/{blog['id']}/like", headers=fan_headers)
    assert resp.status_code == 200
    assert resp.json()["liked_by_user"] is False
    assert resp.json()["likes_count"] == 0
    assert _points(client, author_id) == 12

    assert client.delete(f"{BLOGS}/{blog['id']}/like", headers=fan_headers).status_code == 404


def test_comment_awards_commenter_and_author(client, author, make_user):
    author_id, headers = author
    fan_id, fan_headers = make_user("fan")
    blog = _create_blog(client, headers)["blog"]

    resp = client.post(f"{BLOGS}/{blog['id']}/comments", json={"content": "Great work"}, headers=fan_headers)
    assert resp.status_code == 201
    assert resp.json()["points_awarded"] == 5
    assert _points(client, fan_id) == 5
    assert _points(client, author_id) == 13
    assert client.get(f"{BLOGS}/{blog['id']}").json()["comments_count"] == 1


@pytest.mark.parametrize("payload,detail", [
    ({"title": "   ", "content": "body"}, "Title is required"),
    ({"title": "Title", "content": ""}, "Content is required"),
])
def test_blank_fields_are_rejected_without_award(client, author, payload, detail):
    author_id, headers = author
    resp = client.post(BLOGS, json=payload, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == detail
    assert _points(client, author_id) == 0


def test_unknown_blog_returns_404(client, author, admin):
    _, headers = author
    _, admin_headers = admin
    missing = "00000000-0000-0000-0000-000000000000"
    assert client.get(f"{BLOGS}/{missing}").status_code == 404
    assert client.post(f"{BLOGS}/{missing}/like", headers=headers).status_code == 404
    assert client.post(f"{BLOGS}/{missing}/comments", json={"content": "hi"}, headers=headers).status_code == 404
    assert client.patch(f"{BLOGS}/{missing}/feature", json={"featured": True}, headers=admin_headers).status_code == 404


def test_create_requires_authentication(client):
    assert client.post(BLOGS, json={"title": "t", "content": "c"}).status_code == 401


def test_concurrent_feature_requests_pay_bonus_once(file_session_factory, pause_before):
    Session = file_session_factory
    with Session() as db:
        author = User(name="Author", email="author@example.com")
        admins = [User(name=f"Admin {i}", email=f"admin{i}@example.com") for i in range(2)]
        db.add_all([author, *admins])
        db.flush()
        blog = Blog(user_id=author.id, title="River day", content="Bags collected")
        db.add(blog)
        db.commit()
        author_id, blog_id = author.id, blog.id
        admin_ids = [a.id for a in admins]

    results = []
    results_lock = threading.Lock()

    def feature(admin_id):
        with Session() as db:
            _, points = BlogService(db).set_featured(blog_id, True, admin_id)
        with results_lock:
            results.append(points)

    release = pause_before(Session.kw["bind"], "UPDATE blogs SET featured_bonus_awarded", parties=2)
    try:
        threads = [threading.Thread(target=feature, args=(a,)) for a in admin_ids]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    finally:
        release()

    assert sorted(results) == [0, 50]
    with Session() as db:
        assert db.query(UserPoints).filter_by(user_id=author_id).one().points == 50
        stored = db.get(Blog, blog_id)
        assert stored.featured is True
        assert stored.featured_bonus_awarded is True
