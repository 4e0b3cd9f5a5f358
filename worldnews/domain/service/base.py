"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules for users, posts, likes, feeds and the theme.
    They receive repositories and adapters through their constructors and
    open a logfire span per operation.
    """
