import sys
import time

import pandas
import psutil

from framejoin.frame import Frame
from framejoin.transform import FullJoinTransformer, JoinOptions

try:
    strategy = sys.argv[1]
except IndexError:
    strategy = None

if strategy in ("dimensions", "rows"):
    frames = [Frame.open_csv("data/cpu.csv"), Frame.open_csv("data/mem.csv")]
    transformer = FullJoinTransformer(JoinOptions(["Time", "host"], strategy=strategy))

    def run():
        return transformer.transform(frames)[0].length

elif strategy == "pandas":
    cpu = pandas.read_csv("data/cpu.csv")
    mem = pandas.read_csv("data/mem.csv")

    def run():
        return len(cpu.merge(mem, on=["Time", "host"], how="inner"))

else:
    print("Strategy must be dimensions, rows or pandas")
    sys.exit(1)

proc = psutil.Process()
start = time.time()
rows = run()
end = time.time()

print(
    "ROWS:",
    rows,
    "TIME:",
    round(end - start, 1),
    "MEMORY:",
    proc.memory_full_info().rss // (1024 * 1024),
)
