import os

import pandas as pd
import requests
from dotenv import load_dotenv

# --- CONFIGURATION ---
API_BASE = "http://localhost:8000"
USER_ID = "1"
RESULTS = "3"
KIND = "movie"  # Options: 'user', 'movie'
SIMILARITY = "euclidean"

COLUMNS = {
    "user": {"name": "Name", "userId": "ID", "similarity": "Score"},
    "movie": {"movie": "Movie", "movieId": "ID", "score": "Score"},
}


def load_environment():
    load_dotenv(dotenv_path=os.path.join("backend", ".env"))


def fetch_recommendations(api_base: str, user_id: str, results: str, kind: str) -> dict:
    api_url = f"{api_base}/recommendations"
    response = requests.get(
        api_url,
        params={"kind": kind, "userId": user_id, "results": results, "similarity": SIMILARITY},
        timeout=30,
    )
    response.raise_for_status()
    return response.json()


def fetch_user_name(api_base: str, user_id: str) -> str:
    response = requests.get(f"{api_base}/users/all", timeout=30)
    response.raise_for_status()
    for user in response.json()["res"]:
        if user["UserId"] == user_id:
            return user["Name"]
    return user_id


def build_table(payload: dict, kind: str) -> pd.DataFrame:
    columns = COLUMNS[kind]
    df = pd.DataFrame(payload["data"], columns=list(columns))
    df = df.rename(columns=columns)
    df["Score"] = df["Score"].map(lambda s: f"{float(s):.2f}")
    return df


def main():
    load_environment()
    api_base = os.getenv("API_BASE", API_BASE)
    user_id = os.getenv("USER_ID", USER_ID)
    results = os.getenv("RESULTS", RESULTS)
    kind = os.getenv("KIND", KIND)

    payload = fetch_recommendations(api_base, user_id, results, kind)
    name = fetch_user_name(api_base, user_id)
    heading = "Matching users" if kind == "user" else "Recommended movies"
    print(f"{heading} for {name} ({payload['similarity']}):")

    table = build_table(payload, kind)
    if table.empty:
        print("No results.")
    else:
        print(table.to_string(index=False))


if __name__ == "__main__":
    main()
