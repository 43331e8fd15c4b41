# %% [markdown]
# # nearmatch: A Quick Tour
#
# **"Did you mean ...?"** - picking out what the user most likely meant
#
# ---
#
# ## The Problem
#
# A lookup failed. The key was misspelt, the attribute name has a swapped
# pair of letters, or the wrong exception type was caught:
#
# ```
# "lenght"     vs  "length"
# "Colour"     vs  "colour"
# KeyError     vs  IndexError
# ```
#
# nearmatch scores how alike two values are and keeps only the candidates
# that stand out from the rest.
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distance and similarity |
# | 2 | Ranking candidates |
# | 3 | Shared subsequences |
# | 4 | Hints for error messages |
# | 5 | Polars and reusable indexes |

# %%
import random

import polars as pl

import nearmatch as nm

# %% [markdown]
# ---
# ## Part 1: Edit Distance and Similarity
#
# The edit distance counts insertions, deletions, substitutions and swaps
# of neighbouring characters. With `halfcase=True` a change of letter case
# costs half an edit.

# %%
print(nm.string_distance("typo", "tpyo"))  # 1
print(nm.string_distance("Thing", "thing", halfcase=True))  # 0.5

# %% [markdown]
# `similarity` works on more than text. It picks a rule from the kinds of
# both values.

# %%
print(nm.similarity("Same", "same"))  # 0.875
print(nm.similarity(3, 4))  # 0.75
print(nm.similarity("3", 3))  # 0.0, different kinds

types = nm.TypeHierarchy.from_classes(KeyError, IndexError, ValueError)
print(nm.similarity(types.get("KeyError"), types.get("IndexError")))  # 0.8
print(nm.similarity(types.get("KeyError"), types.get("ValueError")))  # 0.6

# Ordered sequences are scored against random shuffles of themselves
print(nm.similarity([1, 2, 3, 4], [1, 2, 3, 4], rng=random.Random(0)))

# %% [markdown]
# ---
# ## Part 2: Ranking Candidates
#
# `most_similar` scores every candidate, then adapts the threshold to the
# scores so only the clear winners are kept.

# %%
fields = ["length", "width", "height", "depth"]
print(nm.most_similar("lenght", fields))  # ['length']

# Keep the scores
for match in nm.rank_candidates("colr", ["color", "colour", "cooler"]):
    print(f"  [{match.score:.0%}] {match.value}")

# Always offer something
print(nm.most_similar("zzzz", fields, atleast=1))

# %% [markdown]
# ---
# ## Part 3: Shared Subsequences

# %%
print(nm.lcs_indices("fooandbar", "foobar"))  # [1, 2, 3, 7, 8, 9]
print(nm.highlight_lcs_string("colour", "color", before="<", after=">"))  # <colo>u<r>
print(nm.is_subsequence("adg", "abcdefg"))  # True

# %% [markdown]
# ---
# ## Part 4: Hints for Error Messages

# %%
settings = {"timeout": 30, "retries": 3}
print(nm.suggest_keys("timout", settings))  # ['timeout']

context = nm.HintContext()
hint = nm.did_you_mean("lenght", fields, context=context)
print(hint.message)  # Did you mean 'length'?
print(nm.did_you_mean("lenght", fields, context=context))  # None, already shown

# %% [markdown]
# ---
# ## Part 5: Polars and Reusable Indexes

# %%
df = pl.DataFrame({"raw": ["lenght", "wdith", "zzzz"]})
print(df.with_columns(field=pl.col("raw").nearmatch.best_match(fields)))

print(nm.batch_best_match(pl.Series(["lenght", "wdith", None]), fields).to_list())

index = nm.SuggestionIndex(fields)
print(index.search_series(pl.Series(["lenght", "dpeth"])))
