# miniredis

A small Redis-like key-value server that speaks a simple line-based text
protocol. It comes with a few command-line tools that report Linux system
statistics from `/proc` and the filesystem.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The key-value server

```
miniredis-server [--host HOST] [--port PORT] [--backlog N] [--dump FILE]
```

By default the server listens on TCP port 6380 on all interfaces. At startup
it loads data from the dump file, which is `miniredis.dump` in the working
directory by default. If that file cannot be read, the server starts with an
empty store. Each client is served on its own thread. The server writes its
progress messages to standard error.

Commands are sent one per line. A trailing `\r` is dropped and blank lines
are ignored. Words are split on every single space, so two spaces in a row
produce an empty word. Command names are not case-sensitive.

| Command           | Reply                                             |
|-------------------|---------------------------------------------------|
| `PING`            | `+PONG`                                           |
| `PING message`    | the message as a bulk string (`$<len>\r\n<msg>`)  |
| `SET key value`   | `+OK`                                             |
| `GET key`         | the value as a bulk string, or `$-1` if missing   |
| `DEL key`         | `:1` if a key was removed, `:0` otherwise         |
| `SAVE`            | writes the store to the dump file, then `+OK`     |
| `QUIT`            | `+OK`, then the connection is closed              |

`PING` with more than one argument replies with
`-ERR wrong number of arguments for PING command`, and this reply has no line
terminator. If `SAVE` cannot write the dump file, the server sends no reply.
Any other command, or a known command with the wrong number of arguments,
gets `-ERR Wrong command or wrong number of arguments`.

You can try it with any line-oriented TCP client:

```
$ nc localhost 6380
SET name mini-redis
+OK
GET name
$10
mini-redis
DEL name
:1
QUIT
+OK
```

The dump file holds plain text: each key on one line and its value on the
next line.

### Using the store from Python

```python
from miniredis.store import KeyValueStore

store = KeyValueStore("miniredis.dump")
store.set("name", "mini-redis")
store.get("name")      # "mini-redis"
"name" in store        # True
store.delete("name")   # True
store.save()           # raises OSError if the file cannot be written
store.load()           # replaces the contents; returns the number of pairs read
```

`miniredis.protocol.execute_command(store, line)` runs one command line
against a store. It returns a `CommandResult` that holds the reply bytes and
says whether the session should end. `LineBuffer` splits received bytes into
command lines.

## System statistics tools

These tools need Linux.

| Command                         | What it shows                                                  |
|---------------------------------|----------------------------------------------------------------|
| `miniredis-cpu`                 | overall CPU utilisation from `/proc/stat`, sampled every second |
| `miniredis-memory`              | memory and swap figures from `/proc/meminfo`, refreshed on screen |
| `miniredis-disk [PATH]`         | total, free and available space of the filesystem holding `PATH` (default `/`), in whole GB |
| `miniredis-cpuinfo`             | CPU model, logical processors and physical cores from `/proc/cpuinfo` |
| `miniredis-sysinfo`             | total and free RAM and swap in MB, from `/proc/meminfo`          |

Options:

- `miniredis-cpu --stat-file FILE --interval SECONDS --count N`
- `miniredis-memory --meminfo FILE --interval SECONDS --count N`
- `miniredis-cpuinfo --cpuinfo FILE`
- `miniredis-sysinfo --meminfo FILE`

Without `--count`, `miniredis-cpu` and `miniredis-memory` keep running until
you interrupt them with Ctrl-C.

## Limitations

The package has one network server, the key-value server above. It has no
simple greeting server that sends each client a message and then closes the
connection. The store keeps only string values. The server saves data only
when a client sends `SAVE`.