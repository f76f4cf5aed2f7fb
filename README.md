# chromakit

Small building blocks, with no dependencies outside the standard library,
for computing and storing audio fingerprints.

## Installation

```
pip install chromakit
```

To run the test suite, install the test extra and run pytest from the
project directory:

```
pip install "chromakit[test]"
pytest
```

## Modules

- `chromakit.base64`: URL-safe base64 without padding (`-` and `_` take the
  place of `+` and `/`). `encode(data)` takes bytes and returns a `str`;
  `decode(data)` takes a `str` or bytes and returns `bytes`. Characters
  outside the alphabet decode as zero instead of raising, and a trailing
  lone character is dropped. `encoded_size(size)` and `decoded_size(size)`
  give the output lengths.
- `chromakit.simhash`: `simhash(data)` folds a sequence of 32-bit values into
  one 32-bit hash: bit `i` is set when more than half of the values have
  bit `i` set. An empty sequence hashes to 0.
- `chromakit.packing`: `pack_int3_array(values)` and `pack_int5_array(values)`
  pack the low 3 or 5 bits of each integer into a little-endian bit stream;
  `unpack_int3_array(data)` and `unpack_int5_array(data)` return every whole
  value held in the bytes. `packed_int3_size`, `packed_int5_size`,
  `unpacked_int3_size` and `unpacked_int5_size` give the output lengths.
- `chromakit.gradient`: `gradient(values)` returns one entry per input:
  central differences `(next - previous) / 2` inside, one-sided differences
  at the ends. A single value gives `[0]`, an empty input gives `[]`.
- `chromakit.gaussian_filter`: `box_filter(values, width)` is a moving
  average whose window reaches past the ends by mirroring the signal (the
  edge sample repeated); a width of 0 gives zeros and a negative width
  raises `ValueError`. `gaussian_filter(values, sigma, passes)` approximates
  a Gaussian blur with `passes` box filters whose widths are chosen to match
  the variance `sigma ** 2`; `passes` must be positive.
- `chromakit.rolling_integral_image`: `RollingIntegralImage(max_rows)` keeps a
  summed-area table over the most recent rows of a growing image.
  `add_row(row)` appends a row (all rows must have the same length),
  `area(r1, c1, r2, c2)` sums rows `[r1, r2)` and columns `[c1, c2)`,
  `reset()` forgets everything, and `num_rows` / `num_columns` are read-only
  properties. `RollingIntegralImage.from_flat(num_columns, values)` builds an
  image from a flat row-major sequence. Asking for rows that are out of range
  or no longer held raises `IndexError`.
- `chromakit.image_builder`: `ImageBuilder(image)` appends each feature vector
  passed to `consume(features)` to `image` as a row. Any object with a
  `num_columns` attribute and an `add_row` method will do as the image;
  `reset(image)` switches to another one. A vector of the wrong length raises
  `ValueError`.
- `chromakit.silence_remover`: `SilenceRemover(consumer, threshold=0)` drops
  leading silence from a mono stream of integer samples. Once the average
  magnitude over the last 55 samples (`SILENCE_WINDOW`, 5 ms at 11025 Hz)
  exceeds `threshold`, that sample and everything after it is passed to
  `consumer.consume`. `reset(sample_rate, num_channels)` starts looking for
  silence again and raises `ValueError` unless `num_channels` is 1;
  `flush()` calls the consumer's `flush` if it has one.

## Examples

```python
from chromakit.base64 import encode, decode

assert encode(b"xxxx") == "eHh4eA"
assert decode("eHh4eA") == b"xxxx"
```

```python
from chromakit.packing import pack_int3_array, unpack_int3_array

packed = pack_int3_array([1, 2, 3, 4, 5, 6, 7, 0])
assert len(packed) == 3
assert unpack_int3_array(packed) == [1, 2, 3, 4, 5, 6, 7, 0]
```

```python
from chromakit.image_builder import ImageBuilder
from chromakit.rolling_integral_image import RollingIntegralImage

image = RollingIntegralImage(4)
image.add_row([1, 2, 3])
builder = ImageBuilder(image)
builder.consume([4, 5, 6])
assert image.num_rows == 2
assert image.area(0, 0, 2, 3) == 21
```

## What it does not do

The package holds only these pieces. It does not read or decode audio
files, resample or mix down audio, compute spectra or chroma features, or
produce complete fingerprints, and it has no command-line tool.