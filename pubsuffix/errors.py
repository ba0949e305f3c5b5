# coding=utf-8
#
# Errors raised when computing public suffixes. None of them is recovered
# inside the package: resolution either succeeds or fails before a result
# is produced.

class PubSuffixError(Exception):
    pass

class UninitializedRuleSetError(PubSuffixError):
    # No rule list was supplied. An empty list is a valid rule set.
    pass

class MissingAuthorityError(PubSuffixError):
    # Empty host, or a URL without an authority component.
    pass

class MalformedEncodedLabelError(PubSuffixError):
    def __init__(self, label, reason=""):
        self.label = label
        self.reason = reason
        msg = "Cannot decode punycode label <" + label + ">"
        if reason:
            msg += ": " + reason
        super().__init__(msg)
