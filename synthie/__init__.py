"""Score-driven software synthesizer that renders XML scores and test tones to WAVE files."""

__version__ = "0.1.0"