#!/usr/bin/env python3
import json
import mimetypes
import os
import argparse

import requests


def upload(base_url, path):
    content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
    with open(path, "rb") as fp:
        files = {"file": (os.path.basename(path), fp, content_type)}
        resp = requests.post(f"{base_url}/api/payslips/upload", files=files, timeout=60)
    resp.raise_for_status()
    return resp.json()


def main():
    parser = argparse.ArgumentParser(description="Upload a payslip and save the parsed preview to dev/result.json")
    parser.add_argument("file", help="Payslip PDF or image to upload")
    parser.add_argument("--url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--save", action="store_true", help="Also store the parsed values as a payslip")
    args = parser.parse_args()

    data = upload(args.url, args.file)

    if args.save:
        resp = requests.post(f"{args.url}/api/payslips/save", json=data["data"], timeout=60)
        resp.raise_for_status()
        data["saved"] = resp.json()

    os.makedirs("dev", exist_ok=True)
    path = os.path.join("dev", "result.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    print(f"Parsed {args.file} via {args.url}, saved to {path}")


if __name__ == "__main__":
    main()
