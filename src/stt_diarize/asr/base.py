"""ASR registry."""

from stt_diarize.core import Registry, BaseASR

# ASR Registry - all ASR backends register here
ASRRegistry = Registry[BaseASR]("asr")
