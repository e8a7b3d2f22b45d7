"""String enums for the fixed labels a career record uses.

Industry, role, team size and process stage values are the exact display
labels stored on records. Technology categories use stable keys and carry
their display label separately.
"""

from enum import StrEnum


class TechnologyCategory(StrEnum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FRAMEWORK = "framework"
    DATABASE = "database"
    CLOUD = "cloud"
    DEVTOOLS = "devtools"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    TechnologyCategory.FRONTEND: "フロントエンド",
    TechnologyCategory.BACKEND: "バックエンド",
    TechnologyCategory.FRAMEWORK: "フレームワーク",
    TechnologyCategory.DATABASE: "データベース",
    TechnologyCategory.CLOUD: "クラウド・インフラ",
    TechnologyCategory.DEVTOOLS: "開発ツール",
    TechnologyCategory.OTHER: "その他",
}


class Industry(StrEnum):
    WEB = "Web・EC"
    FINANCE = "金融"
    MANUFACTURING = "製造業"
    RETAIL = "流通・小売"
    HEALTHCARE = "医療・ヘルスケア"
    EDUCATION = "教育"
    GOVERNMENT = "官公庁・自治体"
    CONSULTING = "コンサルティング"
    MEDIA = "メディア・広告"
    LOGISTICS = "物流"
    TELECOMMUNICATIONS = "通信・インフラ"
    OTHER = "その他"


class Role(StrEnum):
    PROGRAMMER = "プログラマー"
    SYSTEM_ENGINEER = "システムエンジニア"
    PROJECT_LEADER = "プロジェクトリーダー"
    ARCHITECT = "アーキテクト"
    TECH_LEAD = "テックリード"
    FULL_STACK_ENGINEER = "フルスタックエンジニア"
    FRONTEND_ENGINEER = "フロントエンドエンジニア"
    BACKEND_ENGINEER = "バックエンドエンジニア"
    OTHER = "その他"


class TeamSize(StrEnum):
    SMALL = "小規模（5名未満）"
    MEDIUM = "中規模（5-20名）"
    LARGE = "大規模（20名以上）"
    INDIVIDUAL = "個人"


class DevelopmentProcess(StrEnum):
    REQUIREMENTS = "要件定義"
    BASIC_DESIGN = "基本設計"
    DETAIL_DESIGN = "詳細設計"
    IMPLEMENTATION = "実装"
    UNIT_TEST = "単体テスト"
    INTEGRATION_TEST = "結合テスト"
    SYSTEM_TEST = "システムテスト"
    USER_ACCEPTANCE_TEST = "受入テスト"
    DEPLOYMENT = "リリース・デプロイ"
    MAINTENANCE = "運用・保守"

    @property
    def order(self) -> int:
        """Canonical position of the stage, starting at 0."""
        return list(DevelopmentProcess).index(self)

    @property
    def description(self) -> str:
        return _PROCESS_DESCRIPTIONS[self]


_PROCESS_DESCRIPTIONS = {
    DevelopmentProcess.REQUIREMENTS: "システムの機能や性能要件を定義",
    DevelopmentProcess.BASIC_DESIGN: "システム全体の構成や機能を設計",
    DevelopmentProcess.DETAIL_DESIGN: "プログラムの詳細な設計書を作成",
    DevelopmentProcess.IMPLEMENTATION: "設計書に基づいてプログラムを作成",
    DevelopmentProcess.UNIT_TEST: "個別のプログラムをテスト",
    DevelopmentProcess.INTEGRATION_TEST: "複数のプログラムを組み合わせてテスト",
    DevelopmentProcess.SYSTEM_TEST: "システム全体の動作をテスト",
    DevelopmentProcess.USER_ACCEPTANCE_TEST: "ユーザー目線でシステムを検証",
    DevelopmentProcess.DEPLOYMENT: "本番環境への配置・公開",
    DevelopmentProcess.MAINTENANCE: "システムの保守・改修作業",
}


class StatusFilter(StrEnum):
    ALL = "all"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    RECENT = "recent"
