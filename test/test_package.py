import adtkit
from adtkit import Either
from adtkit import Option
from adtkit import RemoteData


def test_public_names() -> None:
    fa: Option[int] = adtkit.option.some(1)
    fb: Either[str, int] = adtkit.either.right(1)
    fc: RemoteData[str, int] = adtkit.remote_data.success(1)

    assert isinstance(fa, adtkit.Some)
    assert isinstance(fb, adtkit.Right)
    assert isinstance(fc, adtkit.Success)
    assert all(
        issubclass(v, adtkit.Variant)
        for v in [
            *adtkit.option.VARIANTS,
            *adtkit.either.VARIANTS,
            *adtkit.remote_data.VARIANTS,
        ]
    )
