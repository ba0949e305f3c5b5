# coding=utf-8
#
# Matching of a host name against the rules of a public suffix list.
#
# Each rule is compared with the host, label by label from the right. Of
# the rules that match, an exception rule ("!city.kobe.jp") always wins.
# Otherwise the rule with the most labels wins, the first one listed on a
# tie. When nothing matches, the implicit rule "*" applies. An exception
# rule loses its leftmost label before the suffix is taken from the host.
#
# Matching is case sensitive. The host must already be lower case and
# punycode decoded, and the rules must be lower case.
#
# Rules with an exception marker on another label than the first one are
# not rejected. They are matched literally, and will usually never match.

DEFAULT_RULE = "*"

def count_labels(rule):
    return rule.count(".") + 1

def host_labels(host):
    # Empty labels come from leading or repeated dots.
    return [p for p in host.split(".") if p != ""]

def rule_matches(rule, host_parts):
    rule_parts = rule.split(".")
    if len(rule_parts) > len(host_parts):
        return False
    h = len(host_parts) - 1
    for rule_part in reversed(rule_parts):
        host_part = host_parts[h]
        if rule_part != "*" and rule_part != host_part and rule_part != "!" + host_part:
            return False
        h -= 1
    return True

def matches(host, rule_list, test=False):
    host_parts = host_labels(host)
    candidates = []
    for rule in rule_list:
        if rule_matches(rule, host_parts):
            candidates.append(rule)
            if test:
                print("Match \"" + rule + "\" for " + host)
    return candidates

def select_prevailing(candidates, test=False):
    prevailing = None
    longest = 0
    for rule in candidates:
        if rule.startswith("!"):
            prevailing = rule
            break
        rule_length = count_labels(rule)
        if rule_length > longest:
            longest = rule_length
            prevailing = rule
    if prevailing is None:
        prevailing = DEFAULT_RULE
    if test:
        print("Prevailing rule: \"" + prevailing + "\" out of " + str(len(candidates)))
    return prevailing

def trim_exception_rule(rule):
    # "!city.kobe.jp" -> "kobe.jp"
    # A single label exception keeps its one label.
    if not rule.startswith("!"):
        return rule
    return rule[rule.find(".") + 1:]
