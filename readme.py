# ---
# jupyter:
#   jupytext:
#     formats: py:percent,ipynb
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.13.7
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # dashdash
# ## Resolve command-line options without surprises.
#
# `dashdash` matches a list of tokens against option definitions and hands back a report.
# It never prints and never exits: every failure is a value you can inspect.
#
# ## Installation
# ```
# pip install -U dashdash
# ```
# ## Example Usage
# %%
from dashdash import AllowedSetConstraint, Resolver, flag, option

count = option("-c", "--count", type=int, mandatory=True, help="how many")
level = option("--level", constraint=AllowedSetConstraint("debug", "info"))
verbose = flag("-v", "--verbose")
resolver = Resolver(count, level, verbose)
# %% [markdown]
# Options fire with typed values:
# %%
report = resolver.resolve_options(["in.txt", "-v", "--count", "5", "--", "-x"])
report.to_dict()
# %% [markdown]
# Tokens that are not switches end up in `unmatched_arguments`, everything after `--` in `regular_arguments`:
# %%
report.unmatched_arguments, report.regular_arguments
# %% [markdown]
# Failures are recorded per option:
# %%
report = resolver.resolve_options(["--level", "trace", "--colour", "red"])
report.has_error, report.messages()
# %% [markdown]
# Unknown switches that carry a value are kept as extra options:
# %%
list(report.extra)
