# coding=utf-8
#
# Public suffix statistics for lists of names.
#
# Each name is resolved against a suffix_rules object. The detail table has
# one row per name. The summary groups the names by suffix, with the number
# of hits (names found) and subs (distinct registrable domains) for each
# suffix, so that the suffixes under which many names are registered come
# first.

import pandas as pd

from .errors import PubSuffixError

DETAIL_COLUMNS = ["name", "root", "suffix", "registrable_domain", "icann_suffix", "is_private", "error"]
SUMMARY_COLUMNS = ["suffix", "hits", "subs", "is_private"]

def names_from_file(file_name):
    names = []
    with open(file_name, "rt", encoding="utf-8") as f:
        for line in f:
            name = line.split(",")[0].strip()
            if len(name) > 0:
                names.append(name)
    return names

def suffix_frame(names, rules):
    rows = []
    for name in names:
        try:
            x = rules.resolve(name)
        except PubSuffixError as e:
            rows.append([name, "", "", "", "", False, str(e)])
            continue
        rows.append([name, x.root, x.suffix, x.registrable_domain or "", x.icann_suffix,
                     x.is_private_suffix(), ""])
    return pd.DataFrame(rows, columns=DETAIL_COLUMNS)

def suffix_summary(df):
    valid = df[df["error"] == ""]
    if len(valid) == 0:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    registered = valid[valid["registrable_domain"] != ""]
    summary = valid.groupby("suffix").agg(hits=("name", "size"), is_private=("is_private", "any"))
    summary["subs"] = registered.groupby("suffix")["registrable_domain"].nunique()
    summary["subs"] = summary["subs"].fillna(0).astype(int)
    summary = summary.reset_index()[SUMMARY_COLUMNS]
    summary = summary.sort_values(by=["subs", "hits", "suffix"], ascending=[False, False, True])
    return summary.reset_index(drop=True)
