"""Scan ranges of one shared string from several threads at once."""

from concurrent.futures import ThreadPoolExecutor

from textcursor import DIGITS, create

source = ",".join(str(i * 7) for i in range(1000))
root = create(source)

# Split on commas first; each range gets its own independent sub-view
ranges = []
while not root.eof():
    root.save()
    root.eat_while(DIGITS)
    ranges.append((root.start, root.pos))
    root.eat(",")


def read_number(bounds: tuple[int, int]) -> int:
    view = root.limit(*bounds)
    return int(view.consume(DIGITS))


with ThreadPoolExecutor(max_workers=8) as ex:
    numbers = list(ex.map(read_number, ranges))

print(f"Read {len(numbers)} numbers, sum = {sum(numbers)}")
