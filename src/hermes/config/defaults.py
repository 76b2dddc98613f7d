"""Starter .hermes.toml template."""

DEFAULT_TOML = """\
# hermes configuration
version = "1.0"

[check]
match_mode = "span"       # span | text (text searches the whole file for each line)
short_circuit = true      # stop at the first file side that contains code

[filter]
# languages = ["Rust", "C"]   # empty = every language counts

[output]
format = "terminal"       # terminal | json
show_summary = true
"""
