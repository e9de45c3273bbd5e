# vlcdriver/presets.py

from vlcdriver.models import AudioConfig, VideoConfig

AUDIO_PRESETS: dict[str, AudioConfig] = {
    "mp3":        AudioConfig(codec="mp3", bitrate_kbps=128),
    "mp3-high":   AudioConfig(codec="mp3", bitrate_kbps=320),
    "aac":        AudioConfig(codec="mp4a", bitrate_kbps=192),
    "vorbis":     AudioConfig(codec="vorb", bitrate_kbps=160),
    "flac":       AudioConfig(codec="flac", bitrate_kbps=0),
    "mono-voice": AudioConfig(codec="mp3", bitrate_kbps=64, channels=1, sample_rate=22050),
}

VIDEO_PRESETS: dict[str, VideoConfig] = {
    "h264":       VideoConfig(codec="h264", bitrate_kbps=1024),
    "h264-half":  VideoConfig(codec="h264", bitrate_kbps=512, scale=0.5),
    "h265":       VideoConfig(codec="hevc", bitrate_kbps=800),
    "webm":       VideoConfig(codec="VP80", bitrate_kbps=1000,
                              audio=AudioConfig(codec="vorb", bitrate_kbps=128)),
    "mpeg2-dvd":  VideoConfig(codec="mp2v", bitrate_kbps=4096, fps=25, deinterlace=True,
                              audio=AudioConfig(codec="mpga", bitrate_kbps=192, sample_rate=48000)),
}
