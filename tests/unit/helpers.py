from alert_webhook.notifications.transport import WebhookTransport


class DummyLogger:
    def __init__(self):
        self.called = False
        self.args = None
        self.kwargs = None

    def error(self, *a, **k):
        self.called = True
        self.args = a
        self.kwargs = k


class DummyCounter:
    def __init__(self):
        self.calls = []

    def labels(self, **k):
        self.kw = k
        return self

    def inc(self):
        self.calls.append(self.kw)


class DummyTransport(WebhookTransport):
    def __init__(self, exc: BaseException | None = None):
        self.requests = []
        self.exc = exc

    async def send(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
