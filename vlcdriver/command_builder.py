"""
vlcdriver.command_builder
~~~~~~~~~~~~~~~~~~~~~~~~~
Builds VLC command lines as plain list[str].

Keeping command construction separate means you can:
  - log the exact command before running it
  - paste it straight into a terminal for debugging
  - unit-test flag generation without running any process
"""

from __future__ import annotations

from pathlib import Path

from vlcdriver.models import AudioConfig, AudioSpec, TranscodeSpec, VideoSpec

QUIT_TOKEN = "vlc://quit"


def spec_fragment(spec: TranscodeSpec) -> str:
    """
    The part that goes between the braces of #transcode{...}.

    Example:
        AudioSpec(AudioConfig())
        → 'vcodec=none,acodec=mp3,ab=128,channels=2,samplerate=44100'
    """
    if isinstance(spec, AudioSpec):
        return "vcodec=none," + _audio_fragment(spec.config)

    if isinstance(spec, VideoSpec):
        video = spec.config
        parts = [
            f"vcodec={video.codec}",
            f"vb={video.bitrate_kbps}",
            f"scale={_number(video.scale)}",
        ]
        if video.fps is not None:
            parts.append(f"fps={_number(video.fps)}")
        if video.deinterlace:
            parts.append("deinterlace")
        parts.append(_audio_fragment(video.audio))
        return ",".join(parts)

    raise TypeError(f"Unknown transcode spec: {spec!r}")


def build_vlc_arguments(
    password: str,
    port: int,
    input_file: Path,
    spec: TranscodeSpec,
    output_file: Path,
    quit_after: bool,
) -> list[str]:
    """
    Build the VLC arguments (without the executable) for one job.

    The structure is:
        -I http                       ← web interface, used for status polling
        --http-password <secret>
        --http-port <port>
        <input>
        :sout=#transcode{...}:std{dst='<output>',access=file}
        vlc://quit                    ← only when quit_after is set
    """
    sout = (
        f":sout=#transcode{{{spec_fragment(spec)}}}"
        f":std{{dst='{output_file}',access=file}}"
    )
    args = [
        "-I", "http",
        "--http-password", password,
        "--http-port", str(port),
        str(input_file),
        sout,
    ]
    if quit_after:
        args.append(QUIT_TOKEN)
    return args


def arguments_as_string(args: list[str]) -> str:
    """
    Single-line rendering of the arguments for logging, with the input
    path and sout chain quoted the way VLC expects them on a shell.
    """
    head, rest = args[:6], args[6:]
    line = " ".join(head)
    if rest:
        line += f' "{rest[0]}"'
    if len(rest) > 1:
        line += f' "{rest[1]}"'
    for token in rest[2:]:
        line += f" {token}"
    return line


def status_url(port: int) -> str:
    return f"http://localhost:{port}/requests/status.xml"


def _audio_fragment(audio: AudioConfig) -> str:
    return (
        f"acodec={audio.codec},ab={audio.bitrate_kbps},"
        f"channels={audio.channels},samplerate={audio.sample_rate}"
    )


def _number(value: float) -> str:
    """1.0 → '1', 0.5 → '0.5'"""
    return f"{value:g}"
