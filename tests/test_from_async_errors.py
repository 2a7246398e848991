from collections.abc import AsyncIterator, Iterator

from pytest import mark, raises

from fromasync import SourceTooLongError, from_async


class FakeException(Exception):
    pass


class Items:
    def __init__(
        self,
        *elements: object,
    ) -> None:
        self.elements = elements

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> object:
        return self.elements[index]


@mark.asyncio
async def test_propagates_iteration_error():
    error = FakeException()

    def generator() -> Iterator[int]:
        yield 0
        raise error

    with raises(FakeException) as exc_info:
        await from_async(generator())

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_asynchronous_iteration_error():
    error = FakeException()

    async def generator() -> AsyncIterator[int]:
        yield 0
        raise error

    with raises(FakeException) as exc_info:
        await from_async(generator())

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_awaited_element_error():
    error = FakeException()

    async def failing() -> int:
        raise error

    with raises(FakeException) as exc_info:
        await from_async(iter([failing()]))

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_awaited_indexable_element_error():
    error = FakeException()

    async def failing() -> int:
        raise error

    with raises(FakeException) as exc_info:
        await from_async(Items(0, failing()))

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_length_error():
    error = FakeException()

    class Source:
        def __len__(self) -> int:
            raise error

        def __getitem__(self, index: int) -> object:
            raise AssertionError("indexing used")

    with raises(FakeException) as exc_info:
        await from_async(Source())

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_indexing_error():
    error = FakeException()

    class Source:
        def __len__(self) -> int:
            return 2

        def __getitem__(self, index: int) -> object:
            if index > 0:
                raise error

            return index

    with raises(FakeException) as exc_info:
        await from_async(Source())

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_transform_error():
    error = FakeException()

    def transform(value: int, index: int) -> int:
        raise error

    with raises(FakeException) as exc_info:
        await from_async([0, 1], transform)

    assert exc_info.value is error


@mark.asyncio
async def test_propagates_asynchronous_transform_error():
    error = FakeException()

    async def transform(value: int, index: int) -> int:
        raise error

    with raises(FakeException) as exc_info:
        await from_async(Items(0, 1), transform)

    assert exc_info.value is error


@mark.asyncio
async def test_stops_on_first_error():
    transform_error = FakeException()
    iteration_error = FakeException()
    pulled: list[int] = []
    transformed: list[int] = []

    async def generator() -> AsyncIterator[int]:
        for index in range(3):
            pulled.append(index)
            yield index

        raise iteration_error

    def transform(value: int, index: int) -> int:
        transformed.append(index)
        if index == 1:
            raise transform_error

        return value

    with raises(FakeException) as exc_info:
        await from_async(generator(), transform)

    assert exc_info.value is transform_error
    assert pulled == [0, 1]
    assert transformed == [0, 1]


@mark.asyncio
async def test_fails_for_unsupported_source():
    with raises(TypeError):
        await from_async(42)  # pyright: ignore

    with raises(TypeError):
        await from_async(None)  # pyright: ignore


@mark.asyncio
async def test_fails_when_source_exceeds_limit(lowered_ceiling: int):
    transformed: list[int] = []

    def transform(value: int, index: int) -> int:
        transformed.append(index)
        return value

    with raises(SourceTooLongError) as exc_info:
        await from_async(iter(range(lowered_ceiling + 2)), transform)

    assert isinstance(exc_info.value, TypeError)
    assert str(exc_info.value) == "Input is too long and exceeded MAX_SAFE_INTEGER times."
    assert transformed == [0, 1]


@mark.asyncio
async def test_fails_when_asynchronous_source_exceeds_limit(lowered_ceiling: int):
    async def generator() -> AsyncIterator[int]:
        for index in range(lowered_ceiling + 2):
            yield index

    with raises(SourceTooLongError):
        await from_async(generator())


@mark.asyncio
async def test_fails_when_indexable_source_exceeds_limit(lowered_ceiling: int):
    with raises(SourceTooLongError):
        await from_async(Items(*range(lowered_ceiling + 2)))


@mark.asyncio
async def test_collects_source_at_limit(lowered_ceiling: int):
    output = await from_async(iter(range(lowered_ceiling + 1)))
    assert output == list(range(lowered_ceiling + 1))
