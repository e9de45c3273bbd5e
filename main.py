import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication, QTimer

from vlcdriver import VlcDriver, VlcDriverError
from vlcdriver.presets import AUDIO_PRESETS, VIDEO_PRESETS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Transcode one file with VLC.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    parser.add_argument("--audio", action="store_true", help="audio-only transcode")
    parser.add_argument("--preset", help="name from vlcdriver.presets")
    parser.add_argument("--vlc", type=Path, help="path to the VLC executable")
    parser.add_argument("--poll", type=float, default=1.0, help="seconds between status polls")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    driver = VlcDriver()
    if args.vlc:
        driver.vlc_path = args.vlc

    presets = AUDIO_PRESETS if args.audio else VIDEO_PRESETS
    if args.preset and args.preset not in presets:
        sys.exit(f"Unknown preset '{args.preset}'. Choose from: {', '.join(presets)}")
    config = presets.get(args.preset) if args.preset else None

    job = driver.create_audio_job(config) if args.audio else driver.create_video_job(config)
    job.input_file = args.input
    job.output_file = args.output

    # Emitted on the watcher thread; quit() is queued onto the main loop.
    # Connect first: VLC may exit before start_job returns.
    driver.job_state_changed.connect(app.quit)

    try:
        driver.start_job(job)
    except VlcDriverError as exc:
        sys.exit(f"Could not start job: {exc}")

    def _poll():
        if job.update_progress():
            print(f"\r{job.percent_complete * 100:5.1f}%", end="", flush=True)

    timer = QTimer()
    timer.setInterval(int(args.poll * 1000))
    timer.timeout.connect(_poll)
    timer.start()

    app.exec()
    print(f"\nFinished: {job.output_file}")


if __name__ == "__main__":
    main()
