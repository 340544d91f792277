# minilib

A collection of small tools with no runtime dependencies:

- `minilib.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`) and case conversion (`to_upper`, `to_lower`). Each
  accepts an integer code point or a one-character string.
- `minilib.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`. Searches return an index or `None`; a string
  behaves as if followed by a NUL terminator.
- `minilib.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` over `bytearray` and bytes-like objects.
- `minilib.transform`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `atoi`, `itoa`.
- `minilib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  writing to any text stream.
- `minilib.printf`: `sprintf` and `printf` with `%c %s %d %i %u %x %X %p %%`.
- `minilib.linereader`: `LineReader` and `read_lines`, reading a stream one
  line at a time through a fixed-size read buffer.
- `minilib.talk`: sending text between processes one bit per signal
  (`SIGUSR1` for a one, `SIGUSR2` for a zero).
- `minilib.stacks`, `minilib.parsing`, `minilib.solver`: sorting integers
  with the two-stack operations `sa sb ss pa pb ra rb rr rra rrb rrr`.

Python 3.10 or newer is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Characters and strings

```python
from minilib.chars import is_alpha, to_upper
from minilib.strings import strchr, strlcpy
from minilib.transform import atoi, itoa, split, strjoin

is_alpha("a")               # True
to_upper("a")               # "A"
to_upper(97)                # 65
strchr("hello", "l")        # 2
strlcpy("hello", 3)         # ("he", 5): copied text and full source length
split("one  two", " ")      # ["one", "two"]
strjoin("left", "right")    # "leftright"
itoa(-68768)                # "-68768"
atoi("  -42abc")            # -42
```

`atoi` gives -1 for a value above the 32-bit maximum and 0 for one below the
32-bit minimum. `itoa` raises `OverflowError` outside the 32-bit range.

### Memory

```python
from minilib.memory import calloc, memmove, memcmp

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)       # bytearray(b"ababcf"): offsets within one buffer
memcmp(b"abc", b"abd", 3)   # -1
calloc(2, 4)                # bytearray of 8 zero bytes
```

Counts larger than the buffer raise `ValueError`.

### Formatted output

```python
from minilib.printf import printf, sprintf

sprintf("%s has %d items (%x)", "box", 3, 255)   # "box has 3 items (ff)"
sprintf("%s", None)                             # "(null)"
printf("%c%c\n", "o", "k")                      # writes "ok\n", returns 3
```

There are no flags, widths or precisions. `%d`, `%i`, `%u`, `%x` and `%X`
wrap their argument to 32 bits; `%p` prints `0x` and the value in hex, with
`None` as `0x0`. An unknown conversion prints nothing and uses no argument;
too few arguments raise `TypeError`.

### Reading lines

```python
import io
from minilib.linereader import LineReader, read_lines

reader = LineReader(io.StringIO("one\ntwo\nthree"), 4)
reader.read_line()          # "one\n"
list(reader)                # ["two\n", "three"]
reader.read_line()          # None

list(read_lines(io.BytesIO(b"a\nb\n"), 1))   # [b"a\n", b"b\n"]
```

Text and binary streams both work. Each line keeps its newline, if it had
one. The buffer size defaults to 1024 and must be positive.

### Stack operations and sorting

```python
from minilib.stacks import Stacks
from minilib.solver import solve

stacks = Stacks([1, 2, 3])  # bottom first: 3 is on top of a
stacks.sa()
stacks.pb()
stacks.operations           # ["sa", "pb"]

solve([2, 1, 3])            # operations that sort the values, given top first
```

`pa` and `pb` raise `StackError` when the source stack is empty. `solve`
returns an empty list for input that is already in order and raises
`minilib.parsing.InputError` for repeated values.

### Signal messages

```python
from minilib.talk import BitDecoder, encode_message

bits = encode_message("A")  # [0, 1, 0, 0, 0, 0, 0, 1]
decoder = BitDecoder()
[decoder.feed(bit) for bit in bits][-1]   # 65
```

`send_message(pid, text, delay)` sends the bits to another process as
signals, pausing `delay` seconds (50 microseconds by default) after each.

## Commands

### push-swap

Give the numbers to sort as arguments, separately or in quoted groups. The
operations that sort them are printed one per line:

```
push-swap 2 1 3
push-swap "4 67 3 87 23"
```

The first number given ends up on top of stack a. Non-numeric words,
repeated values and numbers outside the 32-bit range print `Error` on
standard error. Input already in order prints nothing.

The number of arguments, not of values, picks the method: three, four or
five arguments use dedicated short sequences that expect exactly that many
values; any other count uses a radix sort. When those dedicated sequences
are given a different number of values they may fail (exit status 1), so
with three to five arguments give each number separately.

### minitalk-server and minitalk-client

Start the server; it prints `Server PID=<pid>` and then writes every byte
it receives to standard output until interrupted:

```
minitalk-server
```

In another terminal, send a message to that process id:

```
minitalk-client <pid> "hello there"
```

The client needs exactly two arguments, the process id and the message;
otherwise it prints `You failed.`. These commands rely on `SIGUSR1`,
`SIGUSR2` and `signal.pause`, so they run on POSIX systems only. Messages
carry no acknowledgement: a lost signal silently corrupts the text.