from framejoin.frame import Frame
from framejoin.transform import (
    FullJoinTransformer,
    JoinOptions,
    SanitizeOptions,
    SanitizeTransformer,
)
from framejoin.utils import tabulate

frames = [Frame.open_csv("data/cpu.csv"), Frame.open_csv("data/mem.csv")]
frames = SanitizeTransformer(SanitizeOptions(["cpu", "mem"])).transform(frames)
for frame in FullJoinTransformer(JoinOptions(["Time", "host"])).transform(frames):
    print(tabulate.tabulate(frame))
