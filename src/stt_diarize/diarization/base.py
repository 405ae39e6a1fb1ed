"""Diarization registry."""

from stt_diarize.core import Registry, BaseDiarizer

# Diarization Registry - all diarization backends register here
DiarizationRegistry = Registry[BaseDiarizer]("diarization")
