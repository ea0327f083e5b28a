import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from diseasematch import config


class ApiError(Exception):
    def __init__(self, status, detail):
        super().__init__(f"{status}: {detail}")
        self.status = status
        self.detail = detail


def get_sess():
    s = requests.Session()
    r = Retry(total=3, backoff_factor=0.2, status_forcelist=[500, 503])
    s.mount("http://", HTTPAdapter(max_retries=r))
    s.mount("https://", HTTPAdapter(max_retries=r))
    return s


class ApiClient:
    """Thin wrapper over the HTTP API, used by the Streamlit UI."""

    def __init__(self, base_url=config.API_URL, session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.http = session or get_sess()
        self.timeout = timeout

    def _check(self, res):
        if res.status_code >= 400:
            try:
                detail = res.json().get("detail")
            except ValueError:
                detail = res.text
            raise ApiError(res.status_code, detail)
        return res.json()

    def predict(self, user_id, symptoms):
        res = self.http.post(f"{self.base_url}/predict",
                             json={"user_id": user_id, "symptoms": list(symptoms)}, timeout=self.timeout)
        return self._check(res)

    def history(self, user_id, limit=config.HISTORY_LIMIT):
        res = self.http.get(f"{self.base_url}/predictions/history",
                            params={"user_id": user_id, "limit": limit}, timeout=self.timeout)
        return self._check(res)

    def diseases(self):
        return self._check(self.http.get(f"{self.base_url}/diseases", timeout=self.timeout))
