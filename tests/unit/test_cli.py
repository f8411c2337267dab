"""Tests for the poolinfo command line interface."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from poolinfo.cli import load_pools, main
from poolinfo.constants import ADDRESS_ZERO
from tests.helpers import BB_A_USD, DAI, USDC, WEIGHTED_POOL, WETH, make_pool, make_token


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Undo the CLI's global logging configuration after each test."""
    monkeypatch.delenv("POOLINFO_WRAPPED_NATIVE_ASSET", raising=False)
    monkeypatch.delenv("POOLINFO_UNWRAP_NATIVE_ASSET", raising=False)
    yield
    structlog.reset_defaults()


class TestLoadPools:
    """Tests for load_pools."""

    def test_single_pool_object(self, pools_dir: Path) -> None:
        pools = load_pools(pools_dir / "bb_a_usd.json")
        assert len(pools) == 1
        assert pools[0]["address"] == BB_A_USD

    def test_pool_list(self, tmp_path: Path) -> None:
        path = tmp_path / "pools.json"
        path.write_text(json.dumps([make_pool(tokens=[]), make_pool(tokens=[])]))
        assert len(load_pools(path)) == 2

    def test_invalid_top_level(self, tmp_path: Path) -> None:
        path = tmp_path / "pools.json"
        path.write_text('"nope"')
        with pytest.raises(ValueError):
            load_pools(path)


class TestNormalizeCommand:
    """Tests for `poolinfo normalize`."""

    def test_writes_output_file(self, pools_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.json"

        code = main(["normalize", str(pools_dir / "weighted_usdc_weth.json"), "-o", str(out)])

        assert code == 0
        data = json.loads(out.read_text())
        info = data[WEIGHTED_POOL]
        assert info["parsedTokens"] == [USDC, WETH]
        assert info["weights"] == ["500000000000000000", "500000000000000000"]
        assert info["totalSharesEvm"] == "1234500000000000000000"
        assert info["higherBalanceTokenIndex"] == 0

    def test_prints_to_stdout(self, pools_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["normalize", str(pools_dir / "bb_a_usd.json")])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data[BB_A_USD]["bptIndex"] == 2

    def test_native_asset_options(self, tmp_path: Path) -> None:
        src = tmp_path / "pools.json"
        src.write_text(json.dumps(make_pool(tokens=[make_token(WETH, "2"), make_token(DAI, "1")])))
        out = tmp_path / "out.json"

        code = main(
            [
                "normalize",
                str(src),
                "--wrapped-native-asset",
                WETH,
                "--unwrap-native-asset",
                "--output",
                str(out),
            ]
        )

        assert code == 0
        assert json.loads(out.read_text())[WEIGHTED_POOL]["parsedTokens"] == [DAI, ADDRESS_ZERO]

    def test_bad_pools_are_skipped(self, tmp_path: Path) -> None:
        src = tmp_path / "pools.json"
        src.write_text(
            json.dumps(
                [
                    make_pool(address=BB_A_USD, tokens=[make_token(DAI, "x")]),
                    make_pool(tokens=[make_token(DAI, "1")]),
                ]
            )
        )
        out = tmp_path / "out.json"

        assert main(["normalize", str(src), "-o", str(out), "--json-logs"]) == 0
        assert list(json.loads(out.read_text())) == [WEIGHTED_POOL]

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["normalize", str(tmp_path / "missing.json")]) == 1

    def test_invalid_json(self, tmp_path: Path) -> None:
        src = tmp_path / "pools.json"
        src.write_text("{not json")
        assert main(["normalize", str(src)]) == 1
