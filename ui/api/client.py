import requests
from config import BASE_URL, OWNER_ID, REQUEST_TIMEOUT


def _call(method, endpoint, owner_id=OWNER_ID, **kwargs):
    try:
        r = requests.request(
            method,
            f"{BASE_URL}/{endpoint}",
            headers={"X-Owner-Id": owner_id},
            timeout=REQUEST_TIMEOUT,
            **kwargs,
        )
    except requests.RequestException as e:
        return 503, {"error": str(e)}
    if r.status_code == 204:
        return r.status_code, {}
    try:
        return r.status_code, r.json()
    except ValueError:
        return r.status_code, {"error": r.text}


def get(endpoint, params=None, owner_id=OWNER_ID):
    return _call("GET", endpoint, owner_id, params=params)


def post(endpoint, payload, owner_id=OWNER_ID):
    return _call("POST", endpoint, owner_id, json=payload)


def put(endpoint, payload, owner_id=OWNER_ID):
    return _call("PUT", endpoint, owner_id, json=payload)


def delete(endpoint, owner_id=OWNER_ID):
    return _call("DELETE", endpoint, owner_id)
