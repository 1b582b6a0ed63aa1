#!/usr/bin/env python3
"""
Generate a large synthetic ranking dataset for trying the leaderboard.
Creates accounts spread over several regions, including follower-count ties
and a few accounts without a region.
"""

import json
import os
import random
import sys

OUTPUT_PATH = "data/sample_ranking.json"
ACCOUNT_COUNT = 250
SEED = 20240601

REGIONS = ["tokyo", "osaka", "kyoto", "nagoya", "fukuoka", "sapporo", "sendai", "kobe"]
FIRST_NAMES = ["misaki", "kenta", "hanako", "taro", "ai", "naoki", "miho", "masato", "sakura", "sho"]
LAST_NAMES = ["tanaka", "sato", "yamada", "suzuki", "takahashi", "ito", "watanabe", "nakamura", "kobayashi", "kato"]
STORE_SUFFIXES = ["cafe", "salon", "bakery", "studio", "boutique", "kitchen"]


def make_account(rng: random.Random, account_id: int) -> dict:
    last = rng.choice(LAST_NAMES)
    first = rng.choice(FIRST_NAMES)
    # Round to the nearest thousand so ties show up regularly.
    followers = round(int(rng.paretovariate(1.2) * 5000), -3)
    region = rng.choice(REGIONS) if rng.random() > 0.05 else ""
    return {
        "id": account_id,
        "accountName": f"{last}_{first}_{account_id}",
        "profileUrl": f"https://www.instagram.com/{last}_{first}_{account_id}/",
        "followers": followers,
        "area": region,
        "storeName": f"{last.title()} {rng.choice(STORE_SUFFIXES)}",
        "imageUrl": f"https://example.com/avatars/{account_id}.jpg",
    }


def main():
    output_path = sys.argv[1] if len(sys.argv) > 1 else OUTPUT_PATH
    rng = random.Random(SEED)

    accounts = [make_account(rng, account_id) for account_id in range(1, ACCOUNT_COUNT + 1)]

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(accounts, handle, ensure_ascii=False, indent=2)

    regions = {account["area"] for account in accounts if account["area"]}
    uncategorized = sum(1 for account in accounts if not account["area"])
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"  Accounts created: {len(accounts)}")
    print(f"  Regions: {len(regions)}")
    print(f"  Without region: {uncategorized}")
    print(f"  Output file: {output_path}")
    print(f"\n  Try it: rankboard show --source {output_path} --category osaka")
    print(f"{'='*60}\n")


if __name__ == "__main__":
    main()
