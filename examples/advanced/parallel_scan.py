"""Free-threading safe: scan one shared buffer from many threads."""

from concurrent.futures import ThreadPoolExecutor

from libstream import Stream
from libstream.charsets import is_digit

source = "\n".join(f"record {i}: {i * 7}" for i in range(10_000))


def total(lines: range) -> int:
    # Each worker gets its own cursor; the buffer is shared and never copied.
    result = 0
    for number, line in enumerate(Stream(source).lines("\n")):
        if number in lines:
            result += int(str(line.drop_until(":").drop().trim_front().take_while(is_digit)))
    return result


chunks = [range(i, i + 2_500) for i in range(0, 10_000, 2_500)]
with ThreadPoolExecutor(max_workers=4) as ex:
    print("Sum:", sum(ex.map(total, chunks)))
