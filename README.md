# zrxid

Structured, human-readable identifiers for resources, glob-based selectors,
and a matcher that tests an identifier against many selectors at once.

## Identifiers

An identifier (`zrxid.id.Id`) has five components, joined with `:` after the
prefix `zri`:

```text
zri:<scheme>:<binding>:<context>:<path>:<fragment>
```

`scheme`, `context` and `path` are required; `binding` and `fragment` may be
empty, in which case their accessors return `None`. A `:` inside a value is
stored percent-encoded (`%3A`) and read back decoded. Values containing a
backslash are rejected with `BackslashError`, so normalise Windows paths to
forward slashes first.

```python
from zrxid.id import Id, to_id

doc = Id("file", "docs", "index.md")
str(doc)                      # 'zri:file::docs:index.md:'

doc.set_fragment("anchor")    # setters return the identifier itself
doc.fragment()                # 'anchor'
doc.binding()                 # None

parsed = Id.parse("zri:file::docs:index.md:")
parsed.path()                 # 'index.md'

to_id("zri:git:main:docs:index.md:")   # parses strings, passes Id through
```

`Id.parse` raises `PrefixError` when the prefix is not `zri`,
`ComponentError` when scheme, context or path is empty, and
`CardinalityError` when the string does not hold exactly six `:`-separated
parts. Identifiers compare, sort and hash by their string form.

### Paths

`zrxid.path.to_path` joins an identifier's context and path into a relative
`pathlib.Path`. Absolute paths raise `RootDirError` and `..` segments raise
`ParentDirError`. `zrxid.path.validate` returns a value unchanged, or raises
`BackslashError` if it contains a backslash.

```python
from zrxid.path import to_path

to_path(doc)                  # Path('docs/index.md')
```

## Selectors

A selector (`zrxid.selector.Selector`) has the same shape with the prefix
`zrs`. Every component may hold a glob, and an empty component matches
anything:

```python
from zrxid.selector import Selector, to_selector

markdown = Selector()
markdown.set_path("**/*.md")
str(markdown)                 # 'zrs::::**/*.md:'
markdown.scheme()             # None

Selector.parse("zrs:git:::**/*.md:")
```

## Matching

`zrxid.matcher.Matcher` is built from any number of selectors. It reports
whether an identifier matches any of them, or which ones match, as indexes in
the order the selectors were added. Identifiers may be passed as `Id` objects
or strings; selectors as `Selector` objects or strings.

```python
from zrxid.matcher import Matcher

builder = Matcher.builder()
builder.add("zrs::::**/*.md:")
builder.add("zrs:git::::")
matcher = builder.build()

matcher.is_match("zri:file::docs:index.md:")   # True
matcher.matches("zri:file::docs:index.md:")    # [0]

Matcher.parse("zrs::::**/*.md:").is_match(doc) # True
```

Globs (`zrxid.matcher.Glob`, collected into `GlobSet`) support `?`, `*`,
`**`, character classes such as `[a-z]` or `[!0-9]`, alternation with
`{a,b}` and `\` escapes. `*` and `?` also match `/`; `**` next to separators
matches any number of path segments, and `**` on its own matches everything.
An invalid pattern raises `GlobError`. An empty selector component counts as
`**`, so a selector with an empty binding or fragment also matches
identifiers in which that component is absent.

## Lower-level pieces

`zrxid.format.Format` is the fixed-count, `:`-separated string that backs
identifiers and selectors, with `encode` and `decode` for the percent
encoding of `:`. `zrxid.span.Span` is the half-open offset range it uses;
growing or shrinking a span beyond 16-bit offsets raises `LengthError`.

## Errors

Every error derives from `zrxid.errors.ZrxIdError`. Format errors
(`CardinalityError`, `LengthError`) derive from `FormatError`; path errors
(`BackslashError`, `ParentDirError`, `RootDirError`) from `PathError`;
`ComponentError` from `IdError`; `GlobError` from `MatcherError`; and
`PrefixError` from both `IdError` and `MatcherError`.

## What it does not do

This is a library only: there is no command-line tool, and identifiers,
selectors and matchers are not stored anywhere beyond their string forms.

## Running the tests

```sh
pip install -e ".[test]"
pytest
```