def group_tags(result, generator, request, public):
    """Normalize tags across the schema for a professional, non-redundant set."""
    patterns = [
        (lambda p: p.startswith("/api/v1/auth/jwt/"), "JWT Authentication"),
        (lambda p: p.startswith("/api/v1/auth/"), "Authentication"),
        (lambda p: p.startswith("/api/v1/users/"), "Users"),
        (lambda p: p.startswith("/api/v1/channels/"), "Channels"),
        (lambda p: p.startswith("/api/v1/conversations/"), "Messaging"),
        (lambda p: p.startswith("/api/v1/notifications/"), "Notifications"),
        (lambda p: p.startswith("/api/v1/reels/"), "Reels"),
        (lambda p: p.startswith("/api/v1/search/"), "Recipe Search"),
        (lambda p: p.startswith("/api/v1/chat/"), "Recipe Search"),
        (lambda p: p == "/api/v1/schema/", "Meta"),
    ]
    for path, operations in result.get("paths", {}).items():
        tag = None
        for pred, name in patterns:
            if pred(path):
                tag = name
                break
        if tag is None:
            continue
        for op in operations.values():
            op["tags"] = [tag]
    return result
