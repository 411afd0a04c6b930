# gumble

Building blocks for programs that speak the Mumble voice chat protocol, and a
small command-line tool, `mumble-ping`, that asks a Mumble server over UDP for
its version, user count and bitrate.

No third-party libraries are required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pinging a server

```
mumble-ping example.com
mumble-ping example.com:64738
mumble-ping --interval 500ms --timeout 3s example.com
mumble-ping --json example.com
```

Without a port, the default Mumble port 64738 (`gumble.conn.DEFAULT_PORT`) is
used. The ping is sent again at every `--interval` (default `1s`) until a reply
arrives or `--timeout` (default `5s`) passes. Durations are written like
`250ms`, `2s` or `1m30s`; the single-dash forms `-interval`, `-timeout` and
`-json` are accepted too.

The plain output lists the address, round-trip time, server version, connected
users, maximum users and maximum bitrate. With `--json` the same information is
printed as one JSON object with the keys `address`, `ping` (milliseconds),
`version`, `connected_users`, `maximum_users` and `maximum_bitrate`.

On failure the error is printed to standard error and the exit status is 1.

## Modules

- `gumble.varint` – the variable-length integer format of voice packets:
  `encode(value)` returns bytes, `decode(data)` returns `(value, length)`. Both
  raise `ValueError` on values or data they cannot handle.
- `gumble.conn` – `Conn` wraps a stream socket in the control protocol's
  framing: `read_packet()` returns `(type, payload)`, `write_packet(type, data)`,
  `write_audio(format, target, sequence, final, data, position)` for tunnelled
  audio, and `close()`. It is a context manager. `PacketType` names the message
  types; `PacketTooLargeError` is raised for packets over
  `maximum_packet_bytes` (10 MiB by default).
- `gumble.ping` – `ping(address, interval, timeout)` returns a `PingResponse`
  (address, round trip in seconds, `Version`, user counts, bitrate) or raises
  `TimeoutError`.
- `gumble.cli` – the `mumble-ping` command (`main`) and `parse_duration`.
- `gumble.version` – `Version` and its `semantic_version()`.
- `gumble.permission` – the `Permission` flags.
- `gumble.reject` – `RejectType` and the `RejectError` exception.
- `gumble.channel`, `gumble.user` – the channel tree (`Channel`, `Channels`,
  with `find()` by name path) and users (`User`, `Users`, `UserStats`,
  `UserStatsUDP`).
- `gumble.acl`, `gumble.bans`, `gumble.userlist`, `gumble.textmessage`,
  `gumble.voicetarget`, `gumble.contextaction` – access control lists, the ban
  list, registered users, chat messages, whisper targets and context actions.
- `gumble.events` – event classes and the change-type flags passed to
  listeners.
- `gumble.listeners` – `Listeners` and `AudioListeners`; `attach()` returns a
  `Detacher`, and `Listeners.dispatch(method, event)` calls that method on every
  attached listener in order.
- `gumble.config` – `Config`, with `attach()`, `attach_audio()` and
  `audio_frame_size()`.
- `gumble.audio` – audio constants, `AudioPacket`, `AudioStreamEvent`, the
  abstract `AudioCodec`, `AudioEncoder` and `AudioDecoder`, and the codec
  registry `register_audio_codec()` / `get_audio_codec()` (IDs 0 to 7).
- `gumble.util` – `Listener` (calls whichever handlers are set), `ListenerFunc`
  (passes every event to one function), `plain_text()`, `channel_path()`,
  `auto_bitrate_data_bytes()` and the `AUTO_BITRATE` listener.
- `gumble.ffmpeg_source` – input sources for ffmpeg: `FileSource`,
  `ReaderSource` and `ExecSource` (which starts a command and hands over its
  output).

## Examples

Pinging from code:

```python
from gumble.ping import ping

response = ping("example.com:64738", 1.0, 5.0)
print(response.version.semantic_version())
print(response.connected_users, response.maximum_users)
```

Listening for events:

```python
from gumble.config import Config
from gumble.events import TextMessageEvent
from gumble.util import Listener, plain_text

config = Config()

def on_text(event):
    print("message:", plain_text(event.message))

detacher = config.attach(Listener(text_message=on_text))
config.listeners.dispatch("on_text_message", TextMessageEvent(message="<b>hi</b>"))
detacher.detach()
```

Walking the channel tree:

```python
from gumble.channel import Channels
from gumble.util import channel_path

channels = Channels()
root = channels.create(0)
child = channels.create(1)
child.name = "Lobby"
child.parent = root
root.children[1] = child

print(channel_path(channels.find("Lobby")))  # ['', 'Lobby']
```

## What this package does not do

It is not a complete Mumble client. There is no code that connects to a server
over TLS, authenticates, encodes or decodes the protocol's protobuf messages,
or turns incoming server messages into changes to channels and users and calls
to listeners; `Channel`, `User` and the other classes are plain data that the
caller fills in. No audio codec is included, so nothing is registered with
`register_audio_codec()` until you supply one, and there is no audio playback,
capture or ffmpeg streaming beyond the input sources in `gumble.ffmpeg_source`.