from __future__ import annotations

import os

from casegen import CsvSheetStore, GenerationConfig, generate_and_store


def main() -> None:
    config = GenerationConfig(
        provider="gemini",
        model="gemini-1.5-flash",
        api_key=os.getenv("API_KEY"),
        temperature=0.2,
    )

    scenarios = [
        "Login with valid credentials",
        "Login with invalid password",
    ]

    report = generate_and_store(
        scenarios,
        config,
        CsvSheetStore("test_cases.csv"),
        progress=lambda percent: print(f"{percent}% done"),
    )
    print(report.message)

if __name__ == "__main__":
    main()
