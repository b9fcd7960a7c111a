"""
기본 정의 데이터 (카탈로그 초기화용).

저장소에 해당 카탈로그 문서가 아직 없을 때 한 번만 사용됩니다.
한 번 저장된 뒤에는 (빈 목록이라도) 저장소의 데이터가 우선합니다.
"""

from app.models import FieldDefinition, ScopeDefinition, TechnicalComponent

_NEW_OR_UPDATE = ">> 신규 컴포넌트 생성 / 기존 컴포넌트 수정"


DEFAULT_FIELD_DEFINITIONS: list[FieldDefinition] = [
    FieldDefinition(id="f1", label="문서명", placeholder="예: CRM 모듈 개발", required=True, order=1),
    FieldDefinition(id="f2", label="요청 유형", placeholder="예: 신규 개발, 버그 수정", required=True, order=2),
    FieldDefinition(id="f3", label="요청 번호", placeholder="예: REQ-2024-001", required=False, order=3),
    FieldDefinition(id="f4", label="요청명", placeholder="짧은 제목", required=True, order=4),
    FieldDefinition(id="f5", label="요청 설명", placeholder="상세 요구사항 설명...", required=True, order=5),
    FieldDefinition(id="f6", label="참조 기술 문서", placeholder="관련 기술 문서 번호", required=False, order=6),
]


DEFAULT_SCOPE_DEFINITIONS: list[ScopeDefinition] = [
    ScopeDefinition(id="s1", category="분석", item="업무 분석"),
    ScopeDefinition(id="s2", category="분석", item="기술 분석"),
    ScopeDefinition(id="s3", category="설계", item="기술 설계"),
    ScopeDefinition(id="s4", category="개발", item="코딩"),
    ScopeDefinition(id="s5", category="개발", item="단위 테스트"),
    ScopeDefinition(id="s6", category="테스트", item="통합 테스트"),
    ScopeDefinition(id="s7", category="테스트", item="데모"),
    ScopeDefinition(id="s8", category="테스트", item="기능 테스트"),
    ScopeDefinition(id="s9", category="테스트", item="사용자 인수 테스트"),
    ScopeDefinition(id="s10", category="테스트", item="성능 테스트"),
    ScopeDefinition(id="s11", category="테스트", item="회귀 테스트"),
    ScopeDefinition(id="s12", category="배포", item="배포 지원"),
]


DEFAULT_TECHNICAL_COMPONENTS: list[TechnicalComponent] = [
    TechnicalComponent(
        id="c1",
        name="Service Consume",
        description="클라이언트로서 호출하는 EJB / 웹 서비스",
        usage="새 EJB/웹 서비스를 호출하거나 기존에 호출하던 서비스를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 파라미터 수\n>> EBO 다양성\n>> 타입 복잡도",
    ),
    TechnicalComponent(
        id="c2",
        name="Service Expose",
        description="외부에 제공하는 EJB / 웹 서비스",
        usage="새 EJB/웹 서비스를 제공하거나 기존에 제공하던 서비스를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 파라미터 수\n>> EBO 다양성\n>> 타입 복잡도",
    ),
    TechnicalComponent(
        id="c3",
        name="User Screen",
        description="Oracle ADF로 개발하는 화면",
        usage="새 ADF 화면을 개발하거나 기존 화면을 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 화면 필드 수\n>> 필드 간 연관 관계 수",
    ),
    TechnicalComponent(
        id="c4",
        name="Rules & Validations via Groovy Script",
        description="Groovy 스크립트로 구현하는 검증 규칙",
        usage="새 검증 스크립트를 만들거나 기존 스크립트를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 접근할 필드 수\n>> 접근할 필드의 타입 다양성",
    ),
    TechnicalComponent(
        id="c5",
        name="Rules & Validations via Java Code",
        description="코드 개발로 구현하는 검증 규칙",
        usage="새 rule executor 코드를 작성하거나 기존 코드를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 접근할 필드 수",
    ),
    TechnicalComponent(
        id="c6",
        name="Validation Engine",
        description="그룹 단위로 실행되는 검증 세트",
        usage="새 그룹 검증 세트를 만들거나 기존 세트를 변경할 때 사용합니다. 채널에 제공되는 검증 서비스로 외부에 공개됩니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 검증 유형(Spec) 수",
    ),
    TechnicalComponent(
        id="c7",
        name="Query",
        description="PL/SQL 또는 ADF Query로 개발하는 Entity / View 객체",
        usage="새 PL/SQL 쿼리나 ADF Query를 개발하거나 기존 컴포넌트를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 입력 파라미터 수\n>> 테이블 다양성 (조인 수)",
    ),
    TechnicalComponent(
        id="c8",
        name="Business Logic Orchestrator",
        description="업무 규칙 실행을 위한 Java Controller 클래스",
        usage="새 Business Logic Orchestrator를 만들거나 기존 controller 클래스를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 실행 규칙 수\n>> 호출하는 Query 및 Service Consume 수\n>> 호출하는 검증 수",
    ),
    TechnicalComponent(
        id="c9",
        name="Task Flow",
        description="BI용 업무 흐름",
        usage="새 Task Flow를 만들거나 기존 흐름을 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 화면 수\n>> 호출하는 Task Flow 수\n>> 입력 및 반환 파라미터 수",
    ),
    TechnicalComponent(
        id="c10",
        name="DB Model",
        description="데이터베이스 테이블",
        usage="데이터 모델에 새 테이블을 만들거나 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 테이블 수\n>> 테이블의 컬럼 수",
    ),
    TechnicalComponent(
        id="c11",
        name="Privilege / Permission",
        description="사용자 관리 및 채널 관리",
        usage="새 사용자/채널 권한을 정의하거나 기존 권한을 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 필드 수\n>> 권한 유형 수",
    ),
    TechnicalComponent(
        id="c12",
        name="Product Catalog",
        description="상품 / 요금제 / 패키지 및 단말 정의",
        usage="카탈로그에 새 상품/단말과 관련 객체(요금제, 패키지, 캠페인 등)를 만들거나 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 카탈로그 객체 수\n>> 객체 정의(Spec) 다양성",
    ),
    TechnicalComponent(
        id="c13",
        name="Configuration Script",
        description="값 목록(LOV) 및 특성(Characteristic) 정의",
        usage="데이터베이스에 추가할 값을 위한 새 설정 스크립트를 만들 때 사용합니다.",
        complexity_criteria=">> 추가할 값 집합 수 (Insert 스크립트이므로 수정 구분 없음)",
    ),
    TechnicalComponent(
        id="c14",
        name="Document Reporting (iReport)",
        description="iReport로 개발하는 양식",
        usage="새 PDF 템플릿을 만들거나 기존 템플릿을 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> PDF 템플릿의 필드 수\n>> 사용할 필드의 Business Entity 다양성",
    ),
    TechnicalComponent(
        id="c15",
        name="Syncronization",
        description="외부 시스템이 갱신한 고객/자산 데이터 동기화",
        usage="동기화 프로시저를 변경할 때 사용합니다.",
        complexity_criteria=">> 추가할 파라미터 수 (고객/자산 외 객체는 동기화하지 않으므로 신규 생성 구분 없음)",
    ),
    TechnicalComponent(
        id="c16",
        name="Datamart",
        description="DWH에 개발하는 데이터마트",
        usage="데이터 모델 객체를 옮길 새 데이터마트를 만들거나 기존 데이터마트를 변경할 때 사용합니다.",
        complexity_criteria=f"{_NEW_OR_UPDATE}\n>> 데이터마트 필드 수\n>> 사용할 필드의 Business Entity 다양성",
    ),
    TechnicalComponent(
        id="c17",
        name="Migration",
        description="운영 DB로의 대량 데이터 이관",
        usage="데이터베이스에 대량 데이터를 이관해야 할 때 사용합니다.",
        complexity_criteria=(
            ">> 이관 데이터 크기\n>> 이관 데이터 다양성\n>> 데이터 정제 필요 여부\n"
            ">> 데이터 변환 필요 여부 (이관 스크립트이므로 수정 구분 없음)"
        ),
    ),
]
