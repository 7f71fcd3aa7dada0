from .heading import Heading, HeadingIdentity, VisibleHeading

__all__ = [
    "Heading",
    "HeadingIdentity",
    "VisibleHeading",
]
