#!/usr/bin/python
# coding=utf-8
#
# The module manages the public suffix list, as published at
# https://publicsuffix.org/list/public_suffix_list.dat
#
# The list is kept as an ordered list of rules. The rules found before the
# end of the ICANN section are also kept in a separate list, so that the
# ICANN suffix and the full suffix can both be computed. A list without
# section markers is treated as ICANN only.
#
# A suffix_rules object starts uninitialized. Resolving a name before a list
# is loaded raises UninitializedRuleSetError. Loading an empty text is valid,
# and gives empty rule lists.

import traceback

from . import suffix_resolver

RULES_ICANN_BEGIN = "// ===BEGIN ICANN DOMAINS==="
RULES_ICANN_END = "// ===END ICANN DOMAINS==="
RULES_PRIVATE_BEGIN = "// ===BEGIN PRIVATE DOMAINS==="
RULES_PRIVATE_END = "// ===END PRIVATE DOMAINS==="

class suffix_rules:
    def __init__(self):
        self.rules = None
        self.icann_rules = None

    def is_initialized(self):
        return self.rules is not None

    def dispose(self):
        self.rules = None
        self.icann_rules = None

    def load_lines(self, lines):
        rules = []
        icann_end = -1
        has_markers = False
        for line in lines:
            l = line.strip()
            if l == RULES_ICANN_BEGIN:
                has_markers = True
            elif l == RULES_ICANN_END:
                has_markers = True
                icann_end = len(rules)
            elif l == RULES_PRIVATE_BEGIN or l == RULES_PRIVATE_END:
                has_markers = True
                if icann_end < 0:
                    icann_end = len(rules)
            if len(l) == 0 or l.startswith("//"):
                continue
            rules.append(l.split()[0].lower())
        if not has_markers or icann_end < 0:
            icann_end = len(rules)
        self.rules = rules
        self.icann_rules = rules[:icann_end]

    def load_text(self, text):
        self.load_lines(text.splitlines())

    def load_file(self, file_name):
        ret = True
        try:
            with open(file_name, "rt", encoding="utf-8") as f:
                lines = f.readlines()
            self.load_lines(lines)
        except (OSError, UnicodeError) as e:
            traceback.print_exc()
            print("Cannot load <" + file_name + ">: " + str(e))
            ret = False
        return ret

    def resolve(self, host, test=False):
        return suffix_resolver.resolve(host, self.rules, self.icann_rules, test)

    def resolve_url(self, url, test=False):
        return suffix_resolver.resolve_url(url, self.rules, self.icann_rules, test)
