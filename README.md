# minishell

Building blocks for a small shell: helpers for strings with C-string
semantics, byte buffers, ASCII character classes, 32-bit number conversion,
writing to streams and reading a stream line by line. It has no
dependencies beyond the standard library.

## Installing

    pip install .

## What is in it

### `minishell.charclass`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify a
character by its ASCII code. `to_lower` and `to_upper` change the case of
ASCII letters and leave anything else alone. Each accepts a one-character
string or an integer code, and the case converters return the same kind
they were given.

    from minishell.charclass import is_alnum, to_upper

    is_alnum("7")     # True
    to_upper("q")     # "Q"
    to_upper(ord("q"))  # 81

### `minishell.convert`

`atoi(text)` parses a leading decimal integer after optional whitespace and
one sign, truncating the result to 32 bits. Text without digits gives 0.
`itoa(n)` renders a 32-bit signed integer and raises `OverflowError` for
values outside `INT_MIN`..`INT_MAX`.

    from minishell.convert import atoi, itoa

    atoi("  -42abc")      # -42
    itoa(-2147483648)     # "-2147483648"

### `minishell.strutil`

String functions that treat text like a C string: everything from the first
NUL character on is ignored, and positions are returned as indices (or
`None` when nothing matches).

- `find_char`, `rfind_char`: first or last index of a character; searching
  for `"\0"` finds the end of the string.
- `find_within(haystack, needle, length)`: index of `needle` lying wholly
  within the first `length` characters.
- `compare(first, second, n)`: difference of the first differing pair of
  bytes among the first `n`, or 0.
- `join`, `substr`, `trim`, `split` (drops empty pieces).
- `bounded_copy(src, size)` and `bounded_concat(dst, src, size)`: what fits
  in a buffer of `size` characters, together with the length that was needed.
- `map_indexed(text, func)`: builds a string from `func(index, char)`.

    from minishell.strutil import split, bounded_copy, compare

    split("/usr/bin::/bin", ":")   # ["/usr/bin", "/bin"]
    bounded_copy("hello", 3)       # ("he", 5)
    compare("abc", "abd", 3)       # -1

### `minishell.memory`

Operations on `bytearray` buffers: `fill`, `zero`, `zeroed`, `copy_bytes`,
`move_bytes` (overlap-safe copy within one buffer), `copy_until`,
`find_byte` and `compare_bytes`. Reaching past the end of a buffer raises
`IndexError`; a negative count raises `ValueError`.

### `minishell.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to the given text
stream, or to standard output when none is given. `put_str` and `put_endl`
write nothing when handed `None`.

### `minishell.linereader`

`LineReader(stream, buffer_size=19)` reads a text or binary stream in chunks
of at most `buffer_size` and returns lines without their newline, through
`read_line()` (which gives `None` at the end) or by iteration.

    import io
    from minishell.linereader import LineReader

    list(LineReader(io.StringIO("one\ntwo\nthree")))   # ["one", "two", "three"]

## What it does not do

There is no interactive shell here and no command to start one. The package
does not split command lines into tokens, does not group them into commands,
does not handle quoting or redirections, and does not run programs. It
provides only the helper modules listed above.

## Running the tests

    pip install .[test]
    pytest