"""Unit tests for the dataset download script."""

from unittest.mock import MagicMock, patch

from fetch_data import download, main


def _response(chunks) -> MagicMock:
    resp = MagicMock()
    resp.__enter__.return_value = resp
    resp.headers = {"content-length": str(sum(len(c) for c in chunks))}
    resp.iter_content.return_value = chunks
    resp.raise_for_status = MagicMock()
    return resp


class TestDownload:
    """Tests for download with mocked HTTP."""

    @patch("fetch_data.requests.get")
    def test_writes_file(self, mock_get: MagicMock, tmp_path) -> None:
        mock_get.return_value = _response([b"id,code\n", b"1,ZW\n"])

        dest = tmp_path / "countries.csv"
        written = download("https://example.org/countries.csv", dest)

        assert written == 13
        assert dest.read_bytes() == b"id,code\n1,ZW\n"
        assert not (tmp_path / "countries.csv.part").exists()
        assert mock_get.call_args[1]["stream"] is True

    @patch("fetch_data.requests.get")
    def test_main_fetches_all_files(self, mock_get: MagicMock, tmp_path) -> None:
        mock_get.side_effect = lambda url, **kwargs: _response([url.encode()])

        main(["--data-dir", str(tmp_path), "--base-url", "https://example.org/data/"])

        urls = [c[0][0] for c in mock_get.call_args_list]
        assert urls == [
            "https://example.org/data/countries.csv",
            "https://example.org/data/airports.csv",
            "https://example.org/data/runways.csv",
        ]
        assert (tmp_path / "runways.csv").read_bytes() == b"https://example.org/data/runways.csv"
