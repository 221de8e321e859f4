#!/usr/bin/env python3
"""
테스트 데이터 초기화 스크립트

부하 테스트 실행 전 조회 대상이 될 상품을 미리 생성합니다.
"""

import argparse
import random
import sys

import requests


def create_test_product(base_url: str, index: int) -> int:
    """테스트 상품 생성 후 ID 반환"""
    response = requests.post(
        f"{base_url}/products",
        json={
            "name": f"Seed Product {index}",
            "description": f"Load test seed product #{index}",
            "price": round(random.uniform(1, 1000), 2),
            "stock": random.randint(0, 100),
        },
        timeout=10,
    )

    if response.status_code != 201:
        print(f"Product creation failed: {response.status_code}")
        print(response.text)
        sys.exit(1)

    return response.json()


def check_health(base_url: str) -> bool:
    """서버 헬스체크"""
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def main():
    parser = argparse.ArgumentParser(description="Seed products for load testing")
    parser.add_argument(
        "--host",
        default="http://localhost:8000",
        help="API server host (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=100,
        help="Number of products to create (default: 100)",
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("Load Test Data Setup")
    print("=" * 60)
    print(f"Target: {args.host}")
    print(f"Products: {args.count}")
    print("=" * 60 + "\n")

    print("Checking server health...")
    if not check_health(args.host):
        print(f"Server is not reachable at {args.host}")
        sys.exit(1)
    print("Server is healthy\n")

    print("Creating test products...")
    product_ids = [create_test_product(args.host, i) for i in range(1, args.count + 1)]
    if product_ids:
        print(f"Created {len(product_ids)} products (ID {product_ids[0]}..{product_ids[-1]})")
    else:
        print("No products created")

    print("\n" + "=" * 60)
    print("Test Data Setup Complete!")
    print("=" * 60)
    print("\nYou can now run Locust tests:")
    print(f"  locust -f load_tests/locustfile.py --host={args.host}")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
