# formantsay

Pure-Python building blocks for rule-based speech synthesis. The package
has no dependencies outside the standard library.

## Modules

### `formantsay.rules`: letter-to-sound rules

A `Rule` has four parts: `left` context, `match` (the text to match),
`right` context and `output` (the phonemes to emit). A `RuleSet` holds
rules indexed by the first letter they match, together with a set of
vowels. It is built either from a mapping of letters to rule lists or
from a plain iterable of rules. `RuleSet.rules_for`, `is_vowel` and
`is_consonant` query it.

Context patterns may hold literal letters, apostrophes and spaces, and
these symbols:

| Symbol | Meaning |
| ------ | ------- |
| `#` | one or more vowels |
| `:` | zero or more consonants |
| `^` | one consonant |
| `.` | one of b, d, v, g, j, l, m, n, r, w, z |
| `+` | one of e, i, y |
| `$` | a doubled consonant |
| `%` | one of er, e, es, ed, ing, ely (right context only) |
| `=` | an optional s followed by a space (right context only) |

Any other symbol in a context raises `ValueError`.

- `left_match` and `right_match` test one context pattern against a word.
- `find_rule` applies the first rule that fits at a position. It returns
  the rule's output and the position after the matched text. When no rule
  fits, it returns `None` and the next position.
- `guess_word` works through a word padded with a space on each side and
  returns the list of outputs.
- `text_to_phonemes` lower-cases the text, pads it, and joins the outputs.

```python
from formantsay.rules import Rule, RuleSet, text_to_phonemes

rules = RuleSet(
    [Rule("", "c", "", "k"), Rule("", "a", "", "a"), Rule("", "t", "", "t")],
    vowels="aeiou",
)
print(text_to_phonemes("Cat", rules))  # kat
```

### `formantsay.trie`: character trie

A `Trie` maps non-empty string keys to values.

- `insert(key, value)` stores a value. An empty key raises `ValueError`.
  A key that is not a string raises `TypeError`.
- `lookup(text, start=0)` follows `text` from `start` as far as the trie
  allows. It returns the value held by the deepest node reached, which is
  `None` when that node holds no value. It also returns the index just
  past the last character matched.
- The trie supports `in`, `len()`, iteration over its keys, and `clear()`.

### `formantsay.synth`: formant synthesiser

- `Resonator` is a second-order filter section. `set_pole`,
  `set_pole_gain` and `set_zero` set its coefficients. `resonate` and
  `antiresonate` filter one sample.
- `db_to_linear` converts a level in dB to a linear gain. A level of
  zero or less gives 0.
- `Speaker` holds the fixed formants and bandwidths of a voice and its
  overall gain. `FrameParams` holds the parameters of one frame. Every
  field of `FrameParams` defaults to 0.
- `Synth(sample_rate, ms_per_frame, speaker, on_sample, on_flush)`
  synthesises frames. `frame(f0_hz, params, name)` calls
  `on_sample(value, index)` for each sample of the frame. `flush(nsamp)`
  calls `on_flush(nsamp)` and resets the sample count. `gen_noise` and
  `filter` expose the noise source and the filter network. If a file
  object is assigned to `voice_file`, the synthesiser writes a trace of
  its source signals to it.

```python
from formantsay.synth import FrameParams, Speaker, Synth

speaker = Speaker(
    f0_hz=133.0, fnp_hz=250.0, bn_hz=100.0,
    f4_hz=3300.0, b4_hz=250.0, b4p_hz=320.0,
    f5_hz=3850.0, b5_hz=200.0, b5p_hz=350.0,
    f6_hz=4900.0, b6p_hz=1000.0,
)
samples = []
synth = Synth(8000, 10.0, speaker,
              on_sample=lambda value, index: samples.append(value),
              on_flush=None)
params = FrameParams(f1=500, b1=60, f2=1500, b2=90, f3=2500, b3=150, av=60)
synth.frame(133.0, params, None)
synth.flush(0)
print(len(samples))  # 80
```

### `formantsay.ulaw_decode`, `formantsay.ulaw_encode`, `formantsay.ulaw`: mu-law coding

- `ulaw_to_linear(code)` and `decode(data)` turn 8-bit mu-law codes into
  16-bit samples.
- `linear_to_ulaw(sample)` and `encode(samples)` turn samples into codes.
  Each sample is first narrowed to a signed 16-bit value.
- `UlawCodec` wraps both directions. It also has `quantize`, which
  returns samples as they come back after a round trip.

```python
from formantsay.ulaw import UlawCodec

codec = UlawCodec()
data = codec.encode([0, 1000, -1000, 32000])
print(codec.decode(data))
```

## What the package does not do

The package has no command-line program and plays no audio. It carries
no language's letter-to-sound rules and no pronunciation dictionary, so
you must supply the `RuleSet`. It does not turn phonemes into
`FrameParams`: you supply the frame parameters to `Synth` yourself.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```