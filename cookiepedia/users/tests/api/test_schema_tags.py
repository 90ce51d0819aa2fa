from drf_spectacular.generators import SchemaGenerator


def test_schema_tag_grouping(db):
    generator = SchemaGenerator()
    schema = generator.get_schema(request=None, public=True)
    paths = schema["paths"]
    expected = {
        "/api/v1/auth/jwt/create/": ["JWT Authentication"],
        "/api/v1/auth/signup/": ["Authentication"],
        "/api/v1/users/me/": ["Users"],
        "/api/v1/channels/": ["Channels"],
        "/api/v1/conversations/": ["Messaging"],
        "/api/v1/notifications/": ["Notifications"],
        "/api/v1/reels/": ["Reels"],
        "/api/v1/search/suggestions/": ["Recipe Search"],
        "/api/v1/chat/": ["Recipe Search"],
    }
    for path, tags in expected.items():
        assert path in paths, path
        first_op = next(iter(paths[path].values()))
        assert first_op.get("tags") == tags, path
