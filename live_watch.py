"""Live check: connect to /ws/chart and print each projection as it arrives."""

import asyncio
import json
import os

import websockets


CHART_URI = os.environ.get("PULSE_CHART_URI", "ws://localhost:8000/ws/chart")


async def chart_listener(duration: float):
    """Print projection pushes until *duration* seconds have passed."""
    async with websockets.connect(CHART_URI) as ws:
        print(f"[CHART] Connected to {CHART_URI} — waiting for projections...\n")
        loop = asyncio.get_running_loop()
        deadline = loop.time() + duration

        while loop.time() < deadline:
            try:
                raw = await asyncio.wait_for(ws.recv(), timeout=deadline - loop.time())
            except asyncio.TimeoutError:
                break
            data = json.loads(raw)

            if data.get("type") == "resize":
                continue

            proj = data.get("projection", {})
            labels = proj.get("x_axis_labels", [])
            values = proj.get("y_values", [])
            print("=" * 70)
            print(f"[CHART] {len(labels)} point(s)")
            for label, value in zip(labels, values):
                print(f"  {label}  {value:8.3f}")


async def main():
    await chart_listener(duration=float(os.environ.get("PULSE_WATCH_SECONDS", "20")))
    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
