from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    TAG_OPEN = auto()
    TAG_CLOSE = auto()
    ATTRIBUTE = auto()
    TEXT = auto()
    COMMENT = auto()
    ERROR = auto()

    @classmethod
    def tag_kinds(cls):
        return (cls.TAG_OPEN, cls.TAG_CLOSE)

    @classmethod
    def display_names(cls):
        return {
            cls.TAG_OPEN: "TagOpen",
            cls.TAG_CLOSE: "TagClose",
            cls.ATTRIBUTE: "Attribute",
            cls.TEXT: "Text",
            cls.COMMENT: "Comment",
            cls.ERROR: "Error",
        }

    @property
    def display_name(self):
        return TokenKind.display_names()[self]
