"""Code review prompt for MCP server."""

from datetime import datetime
from typing import Optional

from greeting_server.tools.time_utils import korean_datetime

TYPESCRIPT = "TypeScript"
JAVASCRIPT = "JavaScript"
PYTHON = "Python"
JAVA = "Java"
C_CPP = "C/C++"
GO = "Go"
RUST = "Rust"
PHP = "PHP"
SQL = "SQL"
UNKNOWN = "Unknown"

LANGUAGES = [TYPESCRIPT, JAVASCRIPT, PYTHON, JAVA, C_CPP, GO, RUST, PHP, SQL, UNKNOWN]


def _contains_any(code: str, patterns) -> bool:
    return any(pattern in code for pattern in patterns)


def detect_language(code: str) -> str:
    """
    Guess the programming language of a snippet from common substrings.

    Rules are checked in order and the first match wins. TypeScript is only
    considered once the snippet already looks like JavaScript.
    """
    if _contains_any(code, ("function ", "const ", "let ", "=>")):
        if _contains_any(code, ("interface ", ": string", ": number")):
            return TYPESCRIPT
        return JAVASCRIPT
    if "def " in code or ("import " in code and "from " in code):
        return PYTHON
    if _contains_any(code, ("public class ", "private ", "public static void main")):
        return JAVA
    if _contains_any(code, ("#include", "int main(")):
        return C_CPP
    if _contains_any(code, ("func ", "package main")):
        return GO
    if _contains_any(code, ("fn ", "let mut ")):
        return RUST
    if "<?php" in code:
        return PHP
    if _contains_any(code, ("SELECT ", "FROM ", "WHERE ")):
        return SQL
    return UNKNOWN


REVIEW_GUIDE = """## 📊 리뷰 체크리스트

### 🔍 코드 품질
- [ ] **가독성**: 코드가 이해하기 쉬운가?
- [ ] **일관성**: 코딩 스타일이 일관되는가?
- [ ] **명명 규칙**: 변수/함수명이 명확한가?
- [ ] **주석**: 필요한 곳에 적절한 주석이 있는가?

### ⚡ 성능 & 효율성
- [ ] **알고리즘**: 효율적인 알고리즘을 사용했는가?
- [ ] **메모리 사용**: 불필요한 메모리 사용이 없는가?
- [ ] **최적화**: 성능 개선 여지가 있는가?

### 🛡️ 보안 & 안정성
- [ ] **에러 처리**: 적절한 예외 처리가 되어있는가?
- [ ] **입력 검증**: 사용자 입력에 대한 검증이 있는가?
- [ ] **보안 취약점**: 알려진 보안 이슈가 없는가?

### 🏗️ 구조 & 설계
- [ ] **모듈화**: 적절히 함수/클래스로 분리되었는가?
- [ ] **재사용성**: 코드 재사용성이 고려되었는가?
- [ ] **확장성**: 향후 확장이 용이한 구조인가?
- [ ] **의존성**: 불필요한 의존성이 없는가?

### 🧪 테스트 가능성
- [ ] **단위 테스트**: 단위 테스트 작성이 용이한가?
- [ ] **디버깅**: 디버깅이 용이한 구조인가?

## 💡 리뷰 가이드라인

### ✅ 좋은 점을 찾아주세요
- 잘 작성된 부분들을 구체적으로 언급
- 좋은 패턴이나 관행 사용 사례

### 🔧 개선 제안
- 구체적인 개선 방안 제시
- 코드 예시와 함께 설명
- 우선순위별로 분류 (critical, major, minor)

### 📚 학습 자료 추천
- 관련 베스트 프랙티스 문서
- 유용한 라이브러리나 도구
- 참고할 만한 코딩 가이드

## 📝 리뷰 템플릿

```markdown
## 🔍 코드 리뷰 결과

### ✅ 잘된 점
- [구체적인 좋은 점들을 나열]

### 🔧 개선사항

#### 🚨 Critical (필수 수정)
- [보안이나 기능에 영향을 주는 중요한 이슈]

#### ⚠️ Major (권장 수정)
- [성능이나 유지보수성에 영향을 주는 이슈]

#### ℹ️ Minor (참고사항)
- [코드 스타일이나 가독성 개선사항]

### 💡 제안사항
- [추가 기능이나 구조 개선 아이디어]

### 📊 전체 평가
**점수**: ⭐⭐⭐⭐☆ (4/5)
**한줄평**: [간단한 전체 평가]
```"""

CLOSING = "위 프롬프트를 사용해서 제공된 코드에 대한 체계적인 리뷰를 진행해주세요."


def build_review_prompt(code: str, now: Optional[datetime] = None) -> str:
    """
    Build the code review request document for a snippet.

    Args:
        code: The code to be reviewed
        now: Generation timestamp; defaults to the local wall clock

    Returns:
        Markdown prompt text
    """
    language = detect_language(code)
    line_count = len(code.split("\n"))
    generated_at = korean_datetime(now or datetime.now())

    header = (
        "# 📋 코드 리뷰 요청\n"
        "\n"
        "## 💻 코드 정보\n"
        f"- **언어**: {language}\n"
        f"- **코드 길이**: {line_count}줄\n"
        "\n"
        "## 📝 리뷰 대상 코드\n"
        f"```{language.lower()}\n"
        f"{code}\n"
        "```\n"
    )
    footer = f"---\n📅 생성일시: {generated_at}\n\n{CLOSING}"
    return f"{header}\n{REVIEW_GUIDE}\n\n{footer}"
