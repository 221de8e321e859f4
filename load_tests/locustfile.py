"""
Locust load test scenarios for the product catalog API

테스트 시나리오:
1. 조회 위주 트래픽: 목록/단건 조회가 대부분
2. 생성-수정-삭제 사이클: 각 사용자가 자기 상품을 만들고 정리
3. 검증 실패 요청: 400 응답이 정상 처리되는지 확인

성능 목표:
- 응답시간: P50 < 100ms, P99 < 500ms
- 5xx 응답 0건
"""

import random
from typing import List

from locust import HttpUser, TaskSet, between, events, task

# 전역 메트릭 수집
created_count = 0
deleted_count = 0
server_errors = 0


class CatalogTaskSet(TaskSet):
    """상품 카탈로그 사용자 행동 모델"""

    def on_start(self):
        """각 사용자가 시작할 때 실행: 자기 상품 목록 초기화"""
        self.user_tag = f"loadtest_{random.randint(1, 1000000)}"
        self.product_ids: List[int] = []

    def on_stop(self):
        """사용자가 종료될 때 남은 상품 정리"""
        for product_id in list(self.product_ids):
            self._delete(product_id)

    def _track_server_error(self, response) -> bool:
        global server_errors
        if response.status_code >= 500:
            server_errors += 1
            response.failure(f"Server error: {response.status_code}")
            return True
        return False

    def _delete(self, product_id: int):
        global deleted_count

        with self.client.delete(
            f"/products/{product_id}",
            name="[Product] Delete",
            catch_response=True,
        ) as response:
            if response.status_code == 204:
                deleted_count += 1
                self.product_ids.remove(product_id)
                response.success()
            elif response.status_code == 404:
                # 다른 사용자가 먼저 지운 경우
                self.product_ids.remove(product_id)
                response.success()
            elif not self._track_server_error(response):
                response.failure(f"Delete failed: {response.status_code}")

    @task(5)
    def list_products(self):
        """상품 목록 조회 (가장 빈번한 작업)"""
        with self.client.get(
            "/products",
            name="[Product] List",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            elif not self._track_server_error(response):
                response.failure(f"List products failed: {response.status_code}")

    @task(4)
    def get_product(self):
        """상품 단건 조회"""
        if not self.product_ids:
            return

        product_id = random.choice(self.product_ids)
        with self.client.get(
            f"/products/{product_id}",
            name="[Product] Get",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                if response.json()["id"] != product_id:
                    response.failure("Returned product ID mismatch")
                else:
                    response.success()
            elif not self._track_server_error(response):
                response.failure(f"Get product failed: {response.status_code}")

    @task(2)
    def create_product(self):
        """상품 생성"""
        global created_count

        with self.client.post(
            "/products",
            json={
                "name": f"{self.user_tag} product",
                "description": "Load test product",
                "price": round(random.uniform(1, 1000), 2),
                "stock": random.randint(0, 100),
            },
            name="[Product] Create",
            catch_response=True,
        ) as response:
            if response.status_code == 201:
                created_count += 1
                self.product_ids.append(response.json())
                response.success()
            elif not self._track_server_error(response):
                response.failure(f"Create failed: {response.status_code}")

    @task(2)
    def update_product(self):
        """상품 수정"""
        if not self.product_ids:
            return

        product_id = random.choice(self.product_ids)
        with self.client.put(
            f"/products/{product_id}",
            json={
                "id": product_id,
                "name": f"{self.user_tag} product (updated)",
                "description": "Updated by load test",
                "price": round(random.uniform(1, 1000), 2),
            },
            name="[Product] Update",
            catch_response=True,
        ) as response:
            if response.status_code in (204, 404):
                response.success()
            elif not self._track_server_error(response):
                response.failure(f"Update failed: {response.status_code}")

    @task(1)
    def delete_product(self):
        """상품 삭제"""
        if not self.product_ids:
            return
        self._delete(random.choice(self.product_ids))

    @task(1)
    def create_invalid_product(self):
        """검증 실패 요청 (400이 정상)"""
        with self.client.post(
            "/products",
            json={"name": "", "price": 0},
            name="[Product] Create Invalid",
            catch_response=True,
        ) as response:
            if response.status_code == 400:
                response.success()
            elif not self._track_server_error(response):
                response.failure(f"Expected 400, got {response.status_code}")


class BrowsingUser(HttpUser):
    """일반 사용자 (조회 위주)"""

    tasks = [CatalogTaskSet]
    wait_time = between(1, 3)
    host = "http://localhost:8000"


class BurstUser(HttpUser):
    """짧은 간격으로 요청하는 사용자"""

    tasks = [CatalogTaskSet]
    wait_time = between(0.1, 0.5)
    host = "http://localhost:8000"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """테스트 시작 시 초기화"""
    global created_count, deleted_count, server_errors
    created_count = 0
    deleted_count = 0
    server_errors = 0

    print("\n" + "=" * 60)
    print("Locust Load Test Started")
    print("=" * 60)
    print(f"Target: {environment.host}")
    print("=" * 60 + "\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """테스트 종료 시 결과 출력"""
    print("\n" + "=" * 60)
    print("Test Results Summary")
    print("=" * 60)
    print(f"Created Products: {created_count}")
    print(f"Deleted Products: {deleted_count}")
    print(f"Server Errors (5xx): {server_errors}")
    print("=" * 60)

    if server_errors > 0:
        print("FAIL: Server errors detected.")
    else:
        print("PASS: No server errors.")

    print("=" * 60 + "\n")


"""
기본 실행 (웹 UI):
    locust -f load_tests/locustfile.py --host=http://localhost:8000

헤드리스 모드 (CLI):
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --host=http://localhost:8000

    # 짧은 간격 사용자만 실행
    locust -f load_tests/locustfile.py --headless --users 500 --spawn-rate 50 -t 3m --host=http://localhost:8000 BurstUser

    # CSV 리포트 저장
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --csv=results/catalog --host=http://localhost:8000
"""
