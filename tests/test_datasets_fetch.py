from wordtree.datasets import fetch

PAGE = """
<html><body>
  <h1>Past answers</h1>
  <table>
    <tr><td>2024-01-02 (Tue) 927 CRANE</td></tr>
    <tr><td>2024-01-01 (Mon) 926 SLATE</td></tr>
    <tr><td>2023-12-31 (Sun) 925 CRANE</td></tr>
  </table>
  <p>Not an answer: GUESS</p>
</body></html>
"""


class _FakeResponse:
    text = PAGE

    def raise_for_status(self):
        pass


def test_parse_answers_dedupes_in_order():
    assert fetch.parse_answers(PAGE) == ["crane", "slate"]


def test_fetch_answers_uses_requests(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse()

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    assert fetch.fetch_answers("http://example.test/answers") == ["crane", "slate"]
    assert calls == [("http://example.test/answers", 30)]
