"""
솔트 해싱 함수 사용 예제
securekit의 해싱, 비밀번호, 입력 검증 기능을 사용하는 방법을 보여줍니다.
"""

import os
import sys

# 프로젝트 루트를 Python 경로에 추가 (import 전에 실행 필요)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# ruff: noqa: E402
from securekit.core.logging_config import setup_logging
from securekit.core.security import generate_token, security_service
from securekit.exceptions import SecurityException, UnsupportedAlgorithmException
from securekit.utils.password import Password
from securekit.utils.salted_hasher import generate_salt, hash_value, validate_hash
from securekit.utils.validators import is_valid_email, is_valid_phone_number


def demo_salted_hashing():
    """솔트 해싱 데모"""
    print("🔐 솔트 해싱 데모 (SHA-256, 128바이트 솔트)")
    print("-" * 50)

    salt = generate_salt()
    hashed = hash_value("secret123", salt)

    print(f"솔트 길이: {len(salt)} 바이트")
    print(f"해시: {hashed}")
    print(f"해시 길이: {len(hashed)} 문자")

    print(f"올바른 값 검증: {validate_hash('secret123', hashed, salt)}")
    print(f"잘못된 값 검증: {validate_hash('wrongpass', hashed, salt)}")

    try:
        hash_value("secret123", salt, "MD2-FAKE")
    except UnsupportedAlgorithmException as e:
        print(f"지원하지 않는 알고리즘: {e.detail} ({e.error_code})")
    print()


def demo_password():
    """플루언트 비밀번호 데모"""
    print("🔑 비밀번호 객체 데모 (bcrypt)")
    print("-" * 35)

    friendly = Password().generate_friendly()
    print(f"친화적 비밀번호: {friendly}")

    password = Password().set("MyPassword").to_lower_case()
    hashed = password.hash()
    print(f"소문자 변환: {password}")
    print(f"bcrypt 해시: {hashed}")
    print(f"검증: {password.verify(hashed)}")
    print()


def demo_validation():
    """입력 검증 데모"""
    print("📋 입력 검증 데모")
    print("-" * 20)

    for email in ["user@example.com", "user@example", ".user@example.com"]:
        print(f"  {email}: {is_valid_email(email)}")
    for phone in ["+821012345678", "010-1234-5678"]:
        print(f"  {phone}: {is_valid_phone_number(phone)}")
    print()


def demo_credential():
    """자격 증명 생성 데모"""
    print("🛡️ 자격 증명 데모")
    print("-" * 20)

    hashed, salt = security_service.create_credential("secure_password123!")
    print(f"  저장될 해시: {hashed[:30]}...")
    print(f"  저장될 솔트: {salt.hex()[:30]}...")
    print(f"  로그인 검증: {security_service.verify_credential('secure_password123!', hashed, salt)}")
    print(f"  세션 토큰: {generate_token()}")
    print()


def main():
    """메인 데모 실행"""
    setup_logging()

    print("🚀 securekit 데모")
    print("=" * 50)
    print()

    try:
        demo_salted_hashing()
        demo_password()
        demo_validation()
        demo_credential()

        print("✅ 모든 데모가 성공적으로 완료되었습니다!")
        print("\n📝 사용법 요약:")
        print("- 솔트 해싱: generate_salt(), hash_value(), validate_hash()")
        print("- 비밀번호: Password().set(...).hash(), Password.verify()")
        print("- 입력 검증: is_valid_email(), is_valid_phone_number()")
        print("- 통합 서비스: security_service 클래스 사용")

    except SecurityException as e:
        print(f"❌ 데모 실행 중 오류 발생: {e.detail}")
        raise


if __name__ == "__main__":
    main()
