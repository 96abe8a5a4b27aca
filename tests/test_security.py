from rayzum.core.security import create_access_token, decode_access_token


def test_access_token_roundtrip():
    subject = "owner-123"
    token = create_access_token(subject)
    assert decode_access_token(token) == subject


def test_expired_token_is_rejected():
    token = create_access_token("owner-123", expires_minutes=-1)
    assert decode_access_token(token) is None


def test_decode_invalid_token():
    assert decode_access_token("not-a-jwt") is None
