import pytest

from gumble.audio import (
    AUDIO_CODEC_ID_OPUS,
    AudioCodec,
    AudioDecoder,
    AudioEncoder,
    AudioPacket,
    AudioStreamEvent,
    get_audio_codec,
    register_audio_codec,
)


class _Encoder(AudioEncoder):
    @property
    def id(self):
        return AUDIO_CODEC_ID_OPUS

    def encode(self, pcm, frame_size, max_data_bytes):
        return bytes(len(pcm))[:max_data_bytes]

    def reset(self):
        pass


class _Decoder(AudioDecoder):
    @property
    def id(self):
        return AUDIO_CODEC_ID_OPUS

    def decode(self, data, frame_size):
        return [0] * frame_size

    def reset(self):
        pass


class _Codec(AudioCodec):
    @property
    def id(self):
        return AUDIO_CODEC_ID_OPUS

    def new_encoder(self):
        return _Encoder()

    def new_decoder(self):
        return _Decoder()


@pytest.fixture
def restore_registry():
    saved = [get_audio_codec(i) for i in range(8)]
    yield
    for i, codec in enumerate(saved):
        register_audio_codec(i, codec)


def test_register_and_get_round_trip(restore_registry):
    codec = _Codec()
    register_audio_codec(AUDIO_CODEC_ID_OPUS, codec)
    assert get_audio_codec(AUDIO_CODEC_ID_OPUS) is codec


def test_unregister_with_none(restore_registry):
    register_audio_codec(2, _Codec())
    register_audio_codec(2, None)
    assert get_audio_codec(2) is None


@pytest.mark.parametrize("codec_id", [-1, 8, 100])
def test_register_out_of_range(codec_id):
    with pytest.raises(ValueError):
        register_audio_codec(codec_id, _Codec())


@pytest.mark.parametrize("codec_id", [-1, 8])
def test_get_out_of_range(codec_id):
    with pytest.raises(ValueError):
        get_audio_codec(codec_id)


def test_abstract_codec_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AudioCodec()


def test_registered_codec_builds_encoder_and_decoder(restore_registry):
    register_audio_codec(AUDIO_CODEC_ID_OPUS, _Codec())
    codec = get_audio_codec(AUDIO_CODEC_ID_OPUS)
    encoder = codec.new_encoder()
    decoder = codec.new_decoder()
    assert encoder.id == decoder.id == codec.id
    assert len(decoder.decode(encoder.encode([1, 2, 3], 3, 2), 5)) == 5


def test_stream_event_carries_packets():
    event = AudioStreamEvent()
    packet = AudioPacket(audio_buffer=[1, -1])
    event.packets.put(packet)
    received = event.packets.get_nowait()
    assert received is packet
    assert received.has_position is False