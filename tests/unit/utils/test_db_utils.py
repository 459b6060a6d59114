from app.utils import db


def test_build_user_pk():
    assert db.build_user_pk("local") == "USER#local"


def test_build_profile_key():
    assert db.build_profile_key("abc") == {"PK": "USER#abc", "SK": "PROFILE"}


def test_get_table_uses_configured_table_name(monkeypatch):
    class FakeResource:
        def Table(self, name):
            return ("table", name)

    monkeypatch.setattr(db, "get_dynamo_resource", lambda: FakeResource())

    assert db.get_table() == ("table", db.TABLE_NAME)
