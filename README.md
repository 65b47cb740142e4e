# gopl

A collection of small, self-contained tools and libraries: counting
duplicate lines, converting temperatures, inserting thousands separators,
comparing values deeply, drawing fractals and Lissajous figures,
extracting links and titles from HTML, serving tiny web applications,
compressing with bzip2, and so on.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Text and data filters (read standard input or named files):

```
gopl-dup [FILE ...]          # print each repeated line with its count
gopl-dedup                   # print each distinct line of stdin once
gopl-charcount               # count Unicode characters and UTF-8 lengths on stdin
gopl-basename                # strip directories and the last .suffix from each line
gopl-rev                     # reverse each line of integers on stdin
```

Arguments in, results out:

```
gopl-echo [-n] [-s SEP] ARG ...   # join arguments, optional trailing newline
gopl-comma 1 12 1234 1234567890   # 1  12  1,234  1,234,567,890
gopl-cf 32 212                    # each number as Fahrenheit and Celsius
gopl-netflag                      # bit-field flag demonstration
gopl-graph                        # course prerequisites in topological order
gopl-movie                        # movies as compact and indented JSON
```

Images and graphics (written to standard output):

```
gopl-mandelbrot > mandelbrot.png
gopl-mandelbrot --func newton --size 512 > newton.png   # also: acos, sqrt
gopl-mandelbrot | gopl-jpeg > mandelbrot.jpg
gopl-lissajous > out.gif
gopl-lissajous web                # serve animations on localhost:8000
gopl-surface > surface.svg
```

Compression:

```
gopl-bzipper < input > input.bz2
```

HTML and the web:

```
gopl-findlinks < page.html        # list href targets
gopl-outline < page.html          # print the element stack of each element
gopl-outline URL ...              # print indented open/close tags of each page
gopl-fetch URL ...                # print each response body
gopl-fetchall URL ...             # fetch concurrently, report time and size
gopl-crawl URL ...                # breadth-first crawl, printing each URL
gopl-title URL ...                # print each page's <title>
gopl-issues [--format text|report|html] TERM ...   # search the GitHub issue tracker
```

Web servers:

```
gopl-server echo                  # answer with the request path
gopl-server counter               # echo, and count requests; /count shows it
gopl-server request               # dump method, headers, host and form
gopl-server search                # /search?l=a&l=b&max=5&x=true
```

`echo`, `counter` and `request` listen on localhost:8000 and `search` on
port 12345 of all interfaces, unless `--host` and `--port` are given.

## Library use

```python
from gopl.strutil import comma, basename
from gopl.word import is_palindrome
from gopl.popcount import pop_count
from gopl.tempconv import Celsius, c_to_f, f_to_c
from gopl.equal import equal

comma("1234567890")                  # "1,234,567,890"
basename("a/b.c.go")                 # "b.c"
is_palindrome("A man, a plan, a canal: Panama")   # True
pop_count(0xFF)                      # 8
str(f_to_c(212.0))                   # "100°C"
equal([1, 2, 3], [1, 2, 3])          # True
```

Other modules:

- `gopl.dup`: `count_lines`, `count_text`, `duplicates`.
- `gopl.echo`: `echo(newline, sep, args, out)`.
- `gopl.slices`: `IntSlice` (append with capacity doubling), `growth_table`,
  `nonempty`, `reverse`, `rotate_left`, `sum_ints`, `squares`.
- `gopl.treesort`: `sort`, an in-place binary-tree insertion sort.
- `gopl.graph`: `Graph`, `topo_sort`, `breadth_first`.
- `gopl.charcount`: `count_chars` returning `CharCounts`, and `dedup`.
- `gopl.movie`: `Movie`, `marshal`, `marshal_indent`, `titles`.
- `gopl.netflag`: `Flags`, `is_up`, `turn_down`, `set_broadcast`, `is_cast`.
- `gopl.htmltree`: `parse` into `Node` trees, `for_each_node`, `visit`,
  `outline`, `outline_tags`, `titles`, `sole_title`.
- `gopl.web`: `fetch`, `fetch_all`, `save`, `find_links`, `extract`,
  `title`, `wait_for_server`.
- `gopl.github`: `search_issues`, `parse_result`, `format_text`,
  `format_report`, `format_html`, `days_ago`.
- `gopl.params`: `unpack` form values into a dataclass, `parse_bool`,
  `ParamError`.
- `gopl.servers`: WSGI apps `echo_app`, `CounterApp`, `request_app`,
  `search_app`, the `SearchQuery` dataclass, and `serve`.
- `gopl.surface`: `f`, `corner`, `svg`.
- `gopl.lissajous`: `lissajous(out, rng)` writes an animated GIF.
- `gopl.fractal`: `mandelbrot`, `acos`, `sqrt`, `newton`, `render`,
  `to_jpeg`.
- `gopl.display`: `display`, `format_any`.
- `gopl.bzip`: `Writer`, a bzip2-compressing writer usable as a context
  manager.

## What is not included

There is no S-expression encoder or decoder, and no helper for tracing
function entry and exit with timings.