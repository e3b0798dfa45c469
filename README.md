# paraaudit

A small command-line tool for keeping a PARA-style directory tree in order.

The tree lives under the directory named by the `PARA_HOME` environment
variable and has four roots:

```
$PARA_HOME/
    projects/
    areas/
    resources/
    archive/
```

Each directory directly inside a root is a *module*. A well-kept module has a
lower-case, underscore-separated name and holds a `README.md` and a
`para.yaml`, for example:

```yaml
open: ["code", "."]
tags: [python, tooling]
git: git@example.com:someone/tool.git
```

## Installation

```
pip install .
```

## Usage

Set `PARA_HOME` first:

```
export PARA_HOME=~/para
```

Then run the `para` command:

```
para audit [LEVEL]          # report violations up to LEVEL (default 10)
para fix [LEVEL]            # print shell commands that would fix them
para search TEXT            # find modules by tag, fuzzy name or substring
para list [ROOT|all]        # list modules of a root (default: projects)
para open MODULE            # run the module's `open` command, then zsh in it
para move MODULE ROOT       # move a module to another root
para new NAME [ROOT]        # create a module (default root: projects)
para note MODULE            # open the module's README.md with `code`
para tags [COUNT]           # list tags used by at least COUNT modules (default 5)
para stats [MIN_COUNT]      # path total and file counts per extension (default 100)
```

Short aliases are available: `a` (audit), `s` (search), `ls` (list),
`o` (open), `mv` (move), `st` (stats) and `edit` (note). `list a` is the
same as `list all`.

On an error, `para` prints `Error: <message>` to standard error and exits
with status 1.

### Finding modules

`search` lists modules whose `para.yaml` tags contain the text exactly,
followed by modules whose name contains the text or has a Jaro similarity
above 0.8 to it.

`open` and `move` first look for a module named exactly as given. Otherwise
`open` falls back to the same search, and `move` to tag and substring
matches only; if more than one module matches, the candidates are printed
and the command fails as ambiguous.

### Opening a module

`para open` runs the command listed under `open` in the module's
`para.yaml` inside the module directory. If `git` is set, the repository is
cloned into `~/Downloads/<name>` (unless that path already exists) and a
symbolic link to it is made inside the module. Finally `zsh` is started in
the module directory.

### What the audit checks

Each violation has a level; `audit LEVEL` and `fix LEVEL` show only those at
or below it. The summary line counts all violations found.

| level | check |
|-------|-------|
| 1 | entries in `PARA_HOME` other than the four roots |
| 1 | plain files directly inside a root |
| 1 | empty modules |
| 1 | modules with nearly identical names (Jaro similarity above 0.96) |
| 2 | module names containing `-`, `,`, spaces, `.` or upper-case letters |
| 2 | `.git`, `.svn`, `.gitignore`, `package-lock.json`, `node_modules`, `venv`, `build`, `target`, `.mypy_cache`, `__pycache__` or `tmp` anywhere in the tree |
| 3 | modules missing `README.md` or `para.yaml` |
| 3 | modules holding more than 1000 paths |
| 4 | modules whose `para.yaml` has no tags |

`para fix` prints `mv`, `touch`, `rm` and `vim` commands for review; it
changes nothing itself. Clutter is proposed to move to
`projects/CLUTTER/`, and badly named modules to a lower-case name with `-`,
spaces and `.` replaced by `_`. Duplicate names and oversized modules have
no proposed fix.

### Colour

Output is coloured when standard output is a terminal. Set `NO_COLOR` or
`CLICOLOR=0` to turn colour off, or `CLICOLOR_FORCE` to a non-zero value to
force it on.

## Development

```
pip install -e ".[test]"
pytest
```