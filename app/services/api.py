# app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("THOUGHTS_API_URL", "http://localhost:8080")

TIMEOUT = 10


def _envelope(res):
    """
    Normalizes a backend response into {"success": ..., "response": ...}.
    """
    try:
        data = res.json()
    except ValueError:
        return {"success": False, "response": f"Error: Status {res.status_code}"}
    if isinstance(data, dict) and "success" in data:
        return data
    return {"success": res.ok, "response": data}


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, password):
    """
    Registers a new user. On success the response carries the access token.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/register",
            json={"username": username, "password": password},
            timeout=TIMEOUT,
        )
        return _envelope(res)
    except requests.RequestException as e:
        return {"success": False, "response": str(e)}


def login_user(username, password):
    """
    Logs in a user and returns {"username", "id", "accessToken"} in the response.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/login",
            json={"username": username, "password": password},
            timeout=TIMEOUT,
        )
        return _envelope(res)
    except requests.RequestException as e:
        return {"success": False, "response": str(e)}


# -------------------------
# Thoughts
# -------------------------

def list_thoughts(access_token):
    """
    Returns the latest thoughts, newest first, or an empty list on failure.
    """
    try:
        res = requests.get(
            f"{FASTAPI_URL}/thoughts",
            headers={"Authorization": access_token},
            timeout=TIMEOUT,
        )
    except requests.RequestException:
        return []
    envelope = _envelope(res)
    data = envelope["response"] if envelope["success"] else None
    return data if isinstance(data, list) else []


def post_thought(access_token, username, message):
    try:
        res = requests.post(
            f"{FASTAPI_URL}/thoughts",
            json={"username": username, "message": message},
            headers={"Authorization": access_token},
            timeout=TIMEOUT,
        )
        return _envelope(res)
    except requests.RequestException as e:
        return {"success": False, "response": str(e)}


def like_thought(access_token, thought_id):
    try:
        res = requests.post(
            f"{FASTAPI_URL}/thoughts/{thought_id}/like",
            headers={"Authorization": access_token},
            timeout=TIMEOUT,
        )
        return _envelope(res)
    except requests.RequestException as e:
        return {"success": False, "response": str(e)}
