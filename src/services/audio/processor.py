"""Audio preparation for the transcription upload.

Normalises whatever the browser recorder produced into 16 kHz mono
16-bit WAV, the format speech-to-text backends handle most cheaply.
"""

import io
import logging

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)


class AudioProcessor:
    """Converts recorded audio bytes into an upload-ready WAV payload."""

    def __init__(self, sample_rate: int = 16000) -> None:
        """Initialize the audio processor.

        Args:
            sample_rate: Target sample rate in Hz (default: 16 kHz).
        """
        self.sample_rate = sample_rate

    def resample(self, data: np.ndarray, source_rate: int) -> np.ndarray:
        """Linearly resample a mono float32 signal to ``self.sample_rate``."""
        if source_rate == self.sample_rate or len(data) == 0:
            return data
        duration = len(data) / source_rate
        num_samples = int(duration * self.sample_rate)
        indices = np.linspace(0, len(data) - 1, num_samples)
        return np.interp(indices, np.arange(len(data)), data).astype(np.float32)

    def to_upload_wav(self, audio_bytes: bytes) -> bytes:
        """Return ``audio_bytes`` as 16-bit mono WAV at the target sample rate.

        Audio that soundfile cannot decode is returned unchanged so the
        backend can still attempt it.

        Args:
            audio_bytes: Raw bytes of the recording (WAV, FLAC, OGG...).

        Returns:
            WAV-encoded bytes.
        """
        if not audio_bytes:
            return audio_bytes
        try:
            data, source_rate = sf.read(io.BytesIO(audio_bytes), dtype="float32")
        except (sf.LibsndfileError, RuntimeError) as exc:
            logger.warning("Could not decode recording, uploading as-is: %s", exc)
            return audio_bytes

        # Convert to mono if stereo
        if data.ndim > 1:
            data = data.mean(axis=1)

        data = self.resample(data, source_rate)

        out = io.BytesIO()
        sf.write(out, data, self.sample_rate, format="WAV", subtype="PCM_16")
        return out.getvalue()
