"""Lex an INI file into (section, key, value) triples with zero copies until print."""

from libstream import Stream

SOURCE = """\
[server]
host = example.org
port = 8080

; comment
[paths]
root = "/srv/www"
"""

section = None
for line in Stream(SOURCE).lines("\n"):
    line.trim()
    if line.empty() or line.starts_with_any(";#"):
        continue
    if line.consume("["):
        section = line.take_until("]")
        continue
    key = line.take_until("=").trim()
    line.drop().trim()
    value = line.take_delimited_any("'\"")
    if value is None:
        value = line
    print(f"{section}.{key} = {value} (at {key.location()})")
