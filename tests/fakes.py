# fakes.py
# Minimal fake service implementing files().list(...).execute() with page tokens
class Exec:
    def __init__(self, data=None, error=None):
        self._data = data
        self._error = error
    def execute(self):
        if self._error is not None:
            raise self._error
        return self._data


class FakeFiles:
    def __init__(self, service):
        self._service = service
    def list(self, q=None, fields=None, orderBy=None, pageSize=100, pageToken=None):
        svc = self._service
        svc.calls.append({"q": q, "fields": fields, "orderBy": orderBy, "pageSize": pageSize, "pageToken": pageToken})
        index = 0 if pageToken is None else int(pageToken)
        if index in svc.fail_on_pages:
            return Exec(error=svc.fail_on_pages[index])
        data = {"files": svc.pages[index] if index < len(svc.pages) else []}
        if index + 1 < len(svc.pages):
            data["nextPageToken"] = str(index + 1)
        return Exec(data)


class FakeService:
    def __init__(self, pages=None, fail_on_pages=None):
        self.pages = pages or []
        self.fail_on_pages = fail_on_pages or {}
        self.calls = []
    def files(self):
        return FakeFiles(self)


def make_file(i, **overrides):
    data = {
        "id": f"id{i}",
        "name": f"file{i}.txt",
        "mimeType": "text/plain",
        "md5Checksum": f"md5-{i}",
        "size": "1500",
        "createdTime": "2024-03-05T10:20:30.000Z",
        "parents": ["root"],
        "headRevisionId": f"rev{i}",
    }
    data.update(overrides)
    return data


def make_pages(*sizes):
    pages, n = [], 0
    for size in sizes:
        pages.append([make_file(i) for i in range(n, n + size)])
        n += size
    return pages
