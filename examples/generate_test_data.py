import csv
import os
import random

if not os.path.exists("data"):
    os.mkdir("data")

hosts = ["web-1", "web-2", "db-1"]
for metric in ("cpu", "mem"):
    filename = f"data/{metric}.csv"
    if os.path.exists(filename):
        continue

    rows = []
    for time in range(0, 3600 * 1000, 10 * 1000):
        for host in hosts:
            if random.random() < 0.05:
                # Randomly skip some samples so that series don't fully overlap
                continue
            rows.append([time, host, round(random.uniform(-1, 100), 2)])

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Time", "host", metric])
        writer.writerows(rows)
