# coding=utf-8
#
# Public suffix computation: split host names into a root label and a
# public suffix, according to the rules of the public suffix list.

from .errors import (
    MalformedEncodedLabelError,
    MissingAuthorityError,
    PubSuffixError,
    UninitializedRuleSetError,
)
from .suffix_list import suffix_rules
from .suffix_resolver import normalize_host, resolve, resolve_url, suffix_result

__all__ = [
    "MalformedEncodedLabelError",
    "MissingAuthorityError",
    "PubSuffixError",
    "UninitializedRuleSetError",
    "normalize_host",
    "resolve",
    "resolve_url",
    "suffix_result",
    "suffix_rules",
]
