# coding=utf-8
#
# Split a host name into a root label and a public suffix.
#
# The host is normalized first: trailing and leading dots are removed, the
# name is lower cased and percent decoded, and every punycode label
# ("xn--...") is decoded so that it can be matched against the Unicode
# rules of the list. Percent decoding comes after lower casing, so
# characters decoded from "%xx" keep their case ("EXAMPLE.%43OM" gives
# "example.Com", which matches no rule). A label that decodes to nothing
# is rejected like any malformed punycode label. The prevailing rule is then found twice, once with
# the full list and once with the ICANN part of the list.
#
# The result is presented the way the host was written. If the host used
# punycode, root and suffix are encoded again, and the decoded view is
# available as "puny_decoded". For example:
#
#   xn--85x722f.xn--55qx5d.cn -> root "xn--85x722f", suffix "xn--55qx5d.cn"
#   puny_decoded              -> root "食狮", suffix "公司.cn"

import re
import urllib.parse

from . import rule_matcher
from .errors import MalformedEncodedLabelError, MissingAuthorityError, UninitializedRuleSetError

PUNYCODE_RE = re.compile(r"xn--[a-z0-9-]+")

class suffix_result:
    def __init__(self, source_host, root, suffix, icann_root, icann_suffix,
                 was_encoded=False, puny_decoded=None):
        self._source_host = source_host
        self._root = root
        self._suffix = suffix
        self._icann_root = icann_root
        self._icann_suffix = icann_suffix
        self._was_encoded = was_encoded
        self._puny_decoded = puny_decoded

    @property
    def source_host(self):
        return self._source_host

    @property
    def root(self):
        return self._root

    @property
    def suffix(self):
        return self._suffix

    @property
    def registrable_domain(self):
        if self._root == "":
            return None
        return self._root + "." + self._suffix

    @property
    def icann_root(self):
        return self._icann_root

    @property
    def icann_suffix(self):
        return self._icann_suffix

    @property
    def icann_registrable_domain(self):
        if self._icann_root == "":
            return None
        return self._icann_root + "." + self._icann_suffix

    @property
    def was_encoded(self):
        return self._was_encoded

    @property
    def puny_decoded(self):
        # None on the decoded view itself.
        return self._puny_decoded

    def is_private_suffix(self):
        return self._suffix != self._icann_suffix

    def __eq__(self, other):
        if not isinstance(other, suffix_result):
            return NotImplemented
        return (self._root, self._suffix, self._icann_root, self._icann_suffix) == \
            (other._root, other._suffix, other._icann_root, other._icann_suffix)

    def __hash__(self):
        return hash((self._root, self._suffix, self._icann_root, self._icann_suffix))

    def __repr__(self):
        return "suffix_result(root=" + repr(self._root) + ", suffix=" + repr(self._suffix) + \
            ", icann_root=" + repr(self._icann_root) + ", icann_suffix=" + repr(self._icann_suffix) + ")"

def decode_label(label):
    try:
        decoded = label[4:].encode("ascii").decode("punycode")
    except UnicodeError as e:
        raise MalformedEncodedLabelError(label, str(e)) from e
    if decoded == "":
        raise MalformedEncodedLabelError(label, "empty label")
    return decoded

def puny_encode(name):
    # Labels that stay the same once encoded, or that only gain the
    # trailing delimiter, are plain ASCII and are not prefixed.
    parts = []
    for part in name.split("."):
        puny = part.encode("punycode").decode("ascii")
        if puny != part + "-" and puny != part:
            parts.append("xn--" + puny)
        else:
            parts.append(part)
    return ".".join(parts)

def normalize_host(host):
    if host is None or host == "":
        raise MissingAuthorityError("No host to resolve")
    n = host.rstrip(".").lower()
    n = urllib.parse.unquote(n)
    was_encoded = PUNYCODE_RE.search(n) is not None
    if was_encoded:
        n = PUNYCODE_RE.sub(lambda m: decode_label(m.group(0)), n)
    n = n.strip(".")
    if n == "":
        raise MissingAuthorityError("No labels left in host <" + host + ">")
    return n, was_encoded

def split_host(host, rule_list, test=False):
    rule = rule_matcher.select_prevailing(rule_matcher.matches(host, rule_list, test), test)
    rule = rule_matcher.trim_exception_rule(rule)
    labels = rule_matcher.host_labels(host)
    nb_parts = rule_matcher.count_labels(rule)
    if nb_parts >= len(labels):
        return "", ".".join(labels)
    return labels[-nb_parts - 1], ".".join(labels[-nb_parts:])

def resolve(host, rule_list, icann_list=None, test=False):
    if rule_list is None:
        raise UninitializedRuleSetError("The public suffix rules have not been loaded")
    if icann_list is None:
        icann_list = rule_list
    name, was_encoded = normalize_host(host)
    if test:
        print("Trying: " + name + (" (punycode)" if was_encoded else ""))

    root, suffix = split_host(name, rule_list, test)
    icann_root, icann_suffix = split_host(name, icann_list, test)

    decoded = suffix_result(host, root, suffix, icann_root, icann_suffix)
    if not was_encoded:
        return suffix_result(host, root, suffix, icann_root, icann_suffix,
                             puny_decoded=decoded)
    return suffix_result(host, puny_encode(root), puny_encode(suffix),
                         puny_encode(icann_root), puny_encode(icann_suffix),
                         was_encoded=True, puny_decoded=decoded)

def resolve_url(url, rule_list, icann_list=None, test=False):
    if rule_list is None:
        raise UninitializedRuleSetError("The public suffix rules have not been loaded")
    parts = urllib.parse.urlsplit(url)
    if not parts.netloc or not parts.hostname:
        raise MissingAuthorityError("The URL is missing the authority component: " + url)
    return resolve(parts.hostname, rule_list, icann_list, test)
