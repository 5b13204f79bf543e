import numpy as np
import pytest

from frameutils.frame_converter import FrameConverter, FrameConverterParams


@pytest.fixture
def values():
    return [i / 255.0 for i in range(256)]


def test_convert_matches_table(values):
    test_arr = np.array([[0, 1, 2], [3, 3, 2], [1, 0, 0]], dtype=np.uint8)
    converter = FrameConverter.from_params(FrameConverterParams(values))
    result = converter.convert(test_arr)
    table = converter.table
    for source_row, result_row in zip(test_arr, result):
        for source, current in zip(source_row, result_row):
            assert current == table[int(source), 0]


def test_table_is_float32_column(values):
    converter = FrameConverter(values)
    assert converter.table.shape == (256, 1)
    assert converter.table.dtype == np.float32
    assert converter.table[255, 0] == np.float32(1.0)


def test_convert_keeps_shape_of_colour_frame(values):
    frame = np.full((4, 5, 3), 255, dtype=np.uint8)
    result = FrameConverter(values).convert(frame)
    assert result.shape == (4, 5, 3)
    assert result.dtype == np.float32
    assert np.all(result == np.float32(1.0))


def test_from_params_keeps_params(values):
    params = FrameConverterParams(values)
    converter = FrameConverter.from_params(params)
    assert converter.params is params
    assert np.array_equal(converter.table, FrameConverter(values).table)


def test_table_of_wrong_size_raises():
    converter = FrameConverter([0.0, 1.0])
    with pytest.raises(ValueError):
        converter.convert(np.zeros((2, 2), dtype=np.uint8))


def test_non_8bit_frame_raises(values):
    with pytest.raises(TypeError):
        FrameConverter(values).convert(np.zeros((2, 2), dtype=np.float32))