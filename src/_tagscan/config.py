"""
Configuration of a scan.

The defaults keep two compatibility quirks: the body of a raw-text element
(script, style) is not captured as text, and a '>' inside a quoted attribute
value ends the tag.
verbatim_raw_text and quote_aware_attributes switch to the corrected handling.
"""

from dataclasses import dataclass, fields

RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


@dataclass(frozen=True)
class ScanConfig:
    """
    Immutable scan configuration, shared by every tokenizer of a scan.

    :param raw_text_elements: Tag names whose body is not scanned as markup,
        compared case-sensitively.
    :param strict: Raise UnterminatedTokenError for the first structural error
        instead of emitting an error token.
    :param verbatim_raw_text: Scan the body of a raw-text element verbatim up
        to its end tag, and emit it as a single text token.
    :param quote_aware_attributes: Do not split attributes on spaces, or end
        the tag on '>', inside quoted attribute values.
    :param allow_trailing_text: Emit text running to the end of the source as a
        text token rather than an error.
    :param encoding: Encoding used to decode byte sources.
    """

    raw_text_elements: frozenset = RAW_TEXT_ELEMENTS
    strict: bool = False
    verbatim_raw_text: bool = False
    quote_aware_attributes: bool = False
    allow_trailing_text: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a ScanConfig from a mapping, ie. one loaded from a settings file.

        :raises ValueError: If the mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"Unknown scan config keys: {sorted(unknown)}")
        values = dict(config_dict)
        if "raw_text_elements" in values:
            values["raw_text_elements"] = frozenset(values["raw_text_elements"])
        return cls(**values)
