"""
challenge - Webhook SQL Challenge Runner
=========================================

Registers with the challenge service, then submits the SQL answer chosen
by the registration number to the webhook it hands back.

Modules:
--------
- config.py        : Configuration management (loads identity and API settings from .env)
- http_client.py   : HTTP client for API communication
- selector.py      : SQL query selection by registration number parity
- runner.py        : The two-step challenge flow and its errors
- run_challenge.py : Main entry point

Usage:
------
    python -m challenge.run_challenge
    python -m challenge.run_challenge --dry-run
    python -m challenge.run_challenge --debug

Workflow:
---------
1. Load configuration from .env file
2. POST name/regNo/email to <base>/generateWebhook/JAVA
3. Pick Query 1 (odd) or Query 2 (even) from the last two digits of regNo
4. POST {"finalQuery": ...} to the returned webhook with the Bearer token
5. Log the final response (or the error) and exit
"""
