from __future__ import annotations

import textwrap


def build_test_case_prompt(scenario: str) -> str:
    return textwrap.dedent(
        f"""
        You are a senior QA engineer writing manual test cases.

        Generate test cases for the scenario below. Apply equivalence
        partitioning and boundary value analysis: cover valid and invalid
        partitions and the values on, just inside and just outside each
        boundary.

        Return ONLY a JSON array (no code fences, no commentary).
        Each item uses exactly this schema:
        {{
          "testCaseId": <string, e.g. "TC-001">,
          "testScenario": <string>,
          "description": <string>,
          "testData": <object or string>,
          "expectedResult": <string>,
          "actualResult": "",
          "severity": "",
          "priority": ""
        }}

        Rules:
        - actualResult, severity and priority MUST be empty strings.
        - Write every string literally; never use expressions such as "a".repeat(10).

        Scenario:
        ---
        {scenario}
        ---
        """
    ).strip()
