"""A cascade/parallel formant synthesiser driven by frames of parameters.

Each frame of parameters gives formant frequencies, bandwidths and
amplitudes. The voicing source is a ramp-and-parabola glottal waveform.
The noise source is a fixed-seed pseudo-random generator. Both are fed
through a cascade of resonators (voice) and a bank of parallel resonators
(frication). Every output sample is handed to a callback.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

__all__ = [
    "Resonator",
    "db_to_linear",
    "Speaker",
    "FrameParams",
    "Synth",
]

_PI = 3.1415927
_VOICE_AMP = 4096.0


def _ctrunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(slots=True)
class Resonator:
    """A second-order digital resonator or anti-resonator."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    p1: float = 0.0
    p2: float = 0.0
    name: str = ""

    def set_pole(
        self, sample_rate: int, freq: float, bandwidth: float, cascade: bool | int = True
    ) -> None:
        """Set resonator coefficients from a centre frequency and bandwidth.

        A resonator whose lower skirt lies above the Nyquist limit becomes
        a pass-through when ``cascade`` is true and silent otherwise.
        """
        minus_pi_t = -_PI / sample_rate
        two_pi_t = -2.0 * minus_pi_t
        if 2 * freq - bandwidth <= sample_rate:
            if 2 * (freq + bandwidth) > sample_rate:
                # Keep the lower skirt; move the centre so the upper skirt
                # meets the Nyquist frequency.
                low = freq - bandwidth
                freq = (sample_rate // 2 + low) / 2
                bandwidth = freq - low
            r = math.exp(minus_pi_t * bandwidth)
            self.c = -(r * r)
            self.b = r * math.cos(two_pi_t * freq) * 2.0
            self.a = 1.0 - self.b - self.c
        else:
            self.a = float(cascade)
            self.b = 0.0
            self.c = 0.0

    def set_pole_gain(
        self,
        sample_rate: int,
        freq: float,
        bandwidth: float,
        gain: float,
        cascade: bool | int = False,
    ) -> None:
        """Set resonator coefficients and fold ``gain`` into them."""
        self.set_pole(sample_rate, freq, bandwidth, cascade)
        self.a *= gain

    def set_zero(self, sample_rate: int, freq: float, bandwidth: float) -> None:
        """Set anti-resonator coefficients from a frequency and bandwidth."""
        self.set_pole(sample_rate, freq, bandwidth, True)
        self.a = 1.0 / self.a
        self.b *= -self.a
        self.c *= -self.a

    def resonate(self, value: float) -> float:
        """Filter one sample, remembering past outputs."""
        x = self.a * value + self.b * self.p1 + self.c * self.p2
        self.p2 = self.p1
        self.p1 = x
        return x

    def antiresonate(self, value: float) -> float:
        """Filter one sample, remembering past inputs."""
        x = self.a * value + self.b * self.p1 + self.c * self.p2
        self.p2 = self.p1
        self.p1 = value
        return x


def db_to_linear(db: float) -> float:
    """Convert decibels to a linear gain; zero or less gives 0."""
    if db > 0:
        return 32768 * 10.0 ** ((db - 87) / 20 - 3)
    return 0.0


@dataclass
class Speaker:
    """Fixed characteristics of a voice."""

    f0_hz: float
    fnp_hz: float
    bn_hz: float
    f4_hz: float
    b4_hz: float
    b4p_hz: float
    f5_hz: float
    b5_hz: float
    b5p_hz: float
    f6_hz: float
    b6p_hz: float
    gain0: float = 57.0


@dataclass
class FrameParams:
    """Synthesis parameters for one frame."""

    fn: float = 0.0
    f1: float = 0.0
    b1: float = 0.0
    f2: float = 0.0
    b2: float = 0.0
    f3: float = 0.0
    b3: float = 0.0
    av: float = 0.0
    avc: float = 0.0
    a2: float = 0.0
    a3: float = 0.0
    a4: float = 0.0
    a5: float = 0.0
    a6: float = 0.0
    ab: float = 0.0
    asp: float = 0.0
    af: float = 0.0


SampleCallback = Callable[[float, int], None]
FlushCallback = Callable[[int], None]


class Synth:
    """Generates audio samples frame by frame from formant parameters."""

    def __init__(
        self,
        sample_rate: int,
        ms_per_frame: float,
        speaker: Speaker,
        on_sample: SampleCallback | None = None,
        on_flush: FlushCallback | None = None,
    ) -> None:
        self.sample_rate = int(sample_rate)
        self.samples_frame = int((self.sample_rate * ms_per_frame) / 1000)
        self.speaker = speaker
        self.on_sample = on_sample
        self.on_flush = on_flush
        self.smooth = 0.5
        self.speed = 1.0
        self.voice_file: TextIO | None = None
        self.params = FrameParams()

        self._seed = 5
        self._nper = 0
        self._t0 = 0
        self._nopen = 0
        self._f0_hz = 0.0
        self._amp_av = 0.0
        self._amp_bypass = 0.0
        self._amp_asp = 0.0
        self._amp_af = 0.0
        self._amp_avc = 0.0
        self._amp_turb = 0.0
        self._ns = 0
        self._usrsamp = 0

        names = (
            "rgl rnz rnpc r5c rsc r4c r3c r2c r1c r6p r5p r4p r3p r2p rout"
        ).split()
        self._res = {n: Resonator(name=n) for n in names}

    def _trace(self, text: str) -> None:
        if self.voice_file is not None:
            self.voice_file.write(text)

    def _set_cascade(self) -> None:
        sr = self.sample_rate
        sp = self.speaker
        ep = self.params
        r = self._res
        r["rnpc"].set_pole(sr, sp.fnp_hz, sp.bn_hz, True)
        r["rnz"].set_zero(sr, ep.fn, sp.bn_hz)
        r["rsc"].set_pole(sr, 3500, 1800, True)
        r["r5c"].set_pole(sr, sp.f5_hz, sp.b5_hz, True)
        r["r4c"].set_pole(sr, sp.f4_hz, sp.b4_hz, True)
        r["r3c"].set_pole(sr, ep.f3, ep.b3, True)
        r["r2c"].set_pole(sr, ep.f2, ep.b2, True)
        r["r1c"].set_pole(sr, ep.f1, ep.b1, True)

    def _pitch_sync(self) -> None:
        f0_hz = self._f0_hz
        ep = self.params
        if ep.av > 0 or ep.avc > 0:
            if f0_hz == 0:
                raise ValueError("voiced frame needs a non-zero F0")
            self._t0 = int((4 * self.sample_rate) / f0_hz)
            self._amp_av = db_to_linear(ep.av)
            self._amp_avc = db_to_linear(ep.avc)
            self._amp_turb = self._amp_avc * 0.1
            self._nopen = _ctrunc_div(self._t0, 3)
        else:
            self._t0 = 4
            self._nopen = self._t0
            self._amp_av = 0.0
            self._amp_avc = 0.0

        if self._t0 != 4 or self._ns == 0:
            self._trace(f"# pitch sync T0={self._t0}\n")
            self._res["rgl"].set_pole(self.sample_rate, 0, int(2 * f0_hz), True)
            self._set_cascade()

    def _gen_voice(self) -> float:
        voice = 0.0
        for _ in range(4):
            if self._nper >= self._t0:
                self._nper = 0
                self._pitch_sync()
            alpha = self._nper / self._t0
            if alpha <= 1.0 / 3:
                voice = 3 * _VOICE_AMP * alpha
            else:
                voice = _VOICE_AMP * ((9 * alpha - 12) * alpha + 3)
            self._nper += 1
        return voice

    def gen_noise(self) -> float:
        """Return the next sample of approximately Gaussian noise."""
        noise = 0
        for _ in range(16):
            self._seed = (self._seed * 1664525 + 1) & 0xFFFFFFFF
            signed = self._seed - 0x100000000 if self._seed & 0x80000000 else self._seed
            noise += signed >> 18
        return noise / 2

    def _setup_frame(self) -> None:
        sr = self.sample_rate
        sp = self.speaker
        ep = self.params
        r = self._res
        gain0 = sp.gain0 - 3

        r["r2p"].set_pole_gain(sr, ep.f2, ep.b2, db_to_linear(ep.a2), False)
        r["r3p"].set_pole_gain(sr, ep.f3, ep.b3, db_to_linear(ep.a3), False)
        r["r4p"].set_pole_gain(sr, sp.f4_hz, sp.b4p_hz, db_to_linear(ep.a4), False)
        r["r5p"].set_pole_gain(sr, sp.f5_hz, sp.b5p_hz, db_to_linear(ep.a5), False)
        r["r6p"].set_pole_gain(sr, sp.f6_hz, sp.b6p_hz, db_to_linear(ep.a6), False)

        self._amp_bypass = db_to_linear(ep.ab)
        self._amp_asp = db_to_linear(ep.asp)
        self._amp_af = db_to_linear(ep.af)

        if gain0 <= 0:
            gain0 = 57
        r["rout"].set_pole_gain(sr, 0, sr // 2, db_to_linear(gain0), True)

    def filter(self, voice: float, noise: float) -> float:
        """Pass voice through the cascade and noise through the parallel bank."""
        r = self._res
        voice = r["rnpc"].resonate(voice)
        voice = r["rnz"].antiresonate(voice)
        voice = r["r1c"].resonate(voice)
        voice = r["r2c"].resonate(voice)
        voice = r["r3c"].resonate(voice)
        voice = r["r4c"].resonate(voice)
        voice = r["rsc"].resonate(voice)
        if self.sample_rate > 8000:
            voice = r["r5c"].resonate(voice)

        # Parallel formants alternate in phase, in formant order.
        voice = r["r2p"].resonate(noise) - voice
        voice = r["r3p"].resonate(noise) - voice
        voice = r["r4p"].resonate(noise) - voice
        voice = r["r5p"].resonate(noise) - voice
        voice = r["r6p"].resonate(noise) - voice
        voice = self._amp_bypass * noise - voice

        return r["rout"].resonate(voice)

    def frame(self, f0_hz: float, params: FrameParams, name: str | None = None) -> int:
        """Synthesise one frame, passing each sample to ``on_sample``.

        Returns the count of samples waiting to be flushed plus one frame.
        """
        self.params = params
        self._setup_frame()
        self._trace("# voice lpvoc noise    out\n")
        if name:
            self._trace(f"# {name}\n")
        self._f0_hz = f0_hz

        for _ in range(self.samples_frame):
            noise = self.gen_noise()
            voice = self._gen_voice()
            lpvoice = self._res["rgl"].resonate(voice)
            if self._nper < self._nopen:
                voice += self._amp_turb * noise
            if self._nper < self._nopen:
                noise *= 0.5
            voice *= self._amp_av
            voice += self._amp_asp * noise
            voice += self._amp_avc * lpvoice
            noise *= self._amp_af

            self._trace("%6g %6g %6g" % (voice, lpvoice, noise))
            voice = self.filter(voice, noise)
            self._trace(" %6g\n" % voice)

            if self.on_sample is not None:
                self.on_sample(voice, self._usrsamp)
                self._usrsamp += 1
            self._ns += 1
        return self._usrsamp + self.samples_frame

    def flush(self, nsamp: int = 0) -> None:
        """Report pending samples to ``on_flush`` and start counting afresh."""
        if not nsamp:
            nsamp = self._usrsamp
        if self.on_flush is not None:
            self.on_flush(nsamp)
        self._usrsamp = 0