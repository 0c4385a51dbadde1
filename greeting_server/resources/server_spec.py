"""Server specification resource for MCP server."""

from datetime import datetime
from typing import Optional

from greeting_server import config
from greeting_server.tools.time_utils import korean_date, korean_time

SERVER_SPEC_URI = f"server://{config.SERVER_NAME}/spec"
SERVER_SPEC_NAME = "server-spec"


def build_server_spec(now: Optional[datetime] = None) -> str:
    """Render the capability catalog, stamped with the current date and time."""
    now = now or datetime.now()
    return f"""# Greeting MCP Server 스펙

## 📋 서버 정보
- **이름**: {config.SERVER_NAME}
- **버전**: {config.SERVER_VERSION}
- **설명**: 다국어 인사, 계산기, 시간 조회 기능을 제공하는 MCP 서버

## 🛠️ 사용 가능한 도구 (Tools)

### 1. greeting
- **설명**: 다국어로 인사 메시지를 생성
- **매개변수**:
  - `name` (string): 인사할 사람의 이름
  - `language` (optional): 언어 선택 (korean, english, japanese, spanish)
- **기본 언어**: 한국어

### 2. add
- **설명**: 두 숫자의 덧셈 계산
- **매개변수**:
  - `a` (number): 첫 번째 숫자
  - `b` (number): 두 번째 숫자

### 3. subtract
- **설명**: 두 숫자의 뺄셈 계산
- **매개변수**:
  - `a` (number): 피감수
  - `b` (number): 감수

### 4. multiply
- **설명**: 두 숫자의 곱셈 계산
- **매개변수**:
  - `a` (number): 첫 번째 숫자
  - `b` (number): 두 번째 숫자

### 5. divide
- **설명**: 두 숫자의 나눗셈 계산 (0으로 나누기 방지)
- **매개변수**:
  - `a` (number): 피제수
  - `b` (number): 제수

### 6. time
- **설명**: 지정된 타임존의 현재 시간 조회
- **매개변수**:
  - `timezone` (optional): IANA 타임존 (기본값: UTC)
- **지원 타임존**: Asia/Seoul, America/New_York, Europe/London 등


## 📝 프롬프트 (Prompts)

### 1. code-review
- **설명**: 코드 리뷰를 위한 체계적인 프롬프트 생성
- **매개변수**:
  - `code` (required): 리뷰할 코드
- **지원 언어**: JavaScript, TypeScript, Python, Java, C/C++, Go, Rust, PHP, SQL 등 (자동 감지)

## 📚 리소스 (Resources)

### 1. {SERVER_SPEC_NAME}
- **설명**: 현재 서버의 상세 스펙 정보 (본 문서)
- **형식**: Markdown

## 🚀 사용 방법
1. MCP 클라이언트에서 서버 연결
2. 원하는 도구를 매개변수와 함께 호출
3. 결과를 텍스트 형태로 수신

## 📅 마지막 업데이트
{korean_date(now)} {korean_time(now)}
"""
