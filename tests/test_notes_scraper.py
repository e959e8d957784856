"""Tests for release-notes scraping."""

import pytest

from percona_digests.core.errors import NotesUnavailable
from percona_digests.core.notes_scraper import fetch_certified_images, parse_certified_images

from conftest import HAPROXY_DIGEST, PXC_DIGEST, PXC_OLD_DIGEST, FakeResponse, FakeSession


def _row(image, digest):
    return f"<tr><td>{image}</td><td>{digest}</td></tr>"


def _table(*rows):
    return "<table>" + "".join(rows) + "</table>"


class TestParseCertifiedImages:
    def test_release_notes_table(self, release_notes_html):
        images = parse_certified_images(release_notes_html)
        assert images == {
            "percona/percona-xtradb-cluster": {
                "8.0.42-33.1": PXC_DIGEST,
                "8.0.41-32.1": PXC_OLD_DIGEST,
            },
            "percona/haproxy": {"2.8.15": HAPROXY_DIGEST},
        }

    def test_idempotent(self, release_notes_html):
        assert parse_certified_images(release_notes_html) == parse_certified_images(release_notes_html)

    def test_single_row_with_header(self):
        html = _table(
            _row("Image", "Digest"),
            _row("percona/percona-xtradb-cluster:8.0.42-33.1", PXC_DIGEST),
        )
        images = parse_certified_images(html)
        assert list(images) == ["percona/percona-xtradb-cluster"]
        assert images["percona/percona-xtradb-cluster"] == {"8.0.42-33.1": PXC_DIGEST}

    @pytest.mark.parametrize("length", [63, 65])
    def test_wrong_digest_length_rejected(self, length):
        html = _table(_row("percona/haproxy:2.8.15", "a" * length))
        assert parse_certified_images(html) == {}

    def test_non_hex_digest_rejected(self):
        html = _table(_row("percona/haproxy:2.8.15", "z" * 64))
        assert parse_certified_images(html) == {}

    def test_sha256_prefixed_digest_rejected(self):
        html = _table(_row("percona/haproxy:2.8.15", "sha256:" + "a" * 64))
        assert parse_certified_images(html) == {}

    def test_non_percona_image_rejected(self):
        html = _table(
            _row("perconalab/haproxy:2.8.15", PXC_DIGEST),
            _row("docker.io/percona/haproxy:2.8.15", PXC_DIGEST),
        )
        assert parse_certified_images(html) == {}

    def test_header_words_rejected_case_insensitively(self):
        html = _table(
            _row("percona/IMAGE-tools:1.0", PXC_DIGEST),
            _row("percona/pmm-digest:1.0", PXC_DIGEST),
        )
        assert parse_certified_images(html) == {}

    def test_row_without_tag_rejected(self):
        html = _table(_row("percona/haproxy", PXC_DIGEST))
        assert parse_certified_images(html) == {}

    def test_annotation_stripped(self):
        html = _table(_row("percona/pmm-client:2.44.1 (recommended)", PXC_DIGEST))
        assert parse_certified_images(html) == {"percona/pmm-client": {"2.44.1": PXC_DIGEST}}

    def test_inline_markup_stripped(self):
        html = _table(
            f"<tr><td><a href='#'><code>percona/pmm-client:2.44.1</code></a></td>"
            f"<td><em>{PXC_DIGEST}</em></td><td>extra</td></tr>"
        )
        assert parse_certified_images(html) == {"percona/pmm-client": {"2.44.1": PXC_DIGEST}}

    def test_last_duplicate_wins(self):
        html = _table(
            _row("percona/haproxy:2.8.15", PXC_OLD_DIGEST),
            _row("percona/haproxy:2.8.15", PXC_DIGEST),
        )
        assert parse_certified_images(html) == {"percona/haproxy": {"2.8.15": PXC_DIGEST}}

    def test_single_cell_rows_skipped(self):
        html = _table("<tr><td>percona/haproxy:2.8.15</td></tr>")
        assert parse_certified_images(html) == {}

    def test_no_tables(self):
        assert parse_certified_images("<p>nothing here</p>") == {}


class TestFetchCertifiedImages:
    URL = "https://docs.example.com/RN1.18.0.html"

    def test_success(self, release_notes_html):
        session = FakeSession({self.URL: FakeResponse(200, text=release_notes_html)})
        images = fetch_certified_images(self.URL, session=session)
        assert "percona/haproxy" in images
        assert session.calls[0]["url"] == self.URL

    def test_http_error(self):
        session = FakeSession({self.URL: FakeResponse(404, text="not found")})
        with pytest.raises(NotesUnavailable, match="HTTP 404"):
            fetch_certified_images(self.URL, session=session)
