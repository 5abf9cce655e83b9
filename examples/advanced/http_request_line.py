"""Parse an HTTP request head straight from a bytes buffer."""

from libstream import Stream
from libstream.charsets import is_space

raw = b"GET /index.html?q=1 HTTP/1.1\r\nHost: example.org\r\nAccept: */*\r\n\r\n"

head = Stream(raw).take_until("\r\n\r\n")
lines = iter(head.lines("\r\n"))

request_line = next(lines)
method = request_line.take_until(" ")
target = request_line.drop().take_until(" ")
version = request_line.drop()
path = target.take_until("?")
query = target.drop()
print(*(part.text().decode() for part in (method, path, query, version)))

for header in lines:
    name = header.take_until(":")
    header.drop().drop_while(is_space)
    print(f"{name.text().decode()}: {header.text().decode()}")
