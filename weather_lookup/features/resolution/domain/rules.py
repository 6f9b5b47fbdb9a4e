"""
地点解決で使用する固定ルールテーブル

正規化・候補クエリ生成・候補絞り込みはすべてこのモジュールの定数を参照する。
ルールを追加・変更する場合は制御フローではなくここを編集する。
"""
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# 文字体系・正規化
# ---------------------------------------------------------------------------

# アラビア文字ブロック
ARABIC_CHAR_PATTERN = r"[\u0600-\u06FF]"

# アラビア語の発音記号（タシュキール: ファトハ、ダンマ、カスラ、スクーン、シャッダ、タンウィーン等）
ARABIC_DIACRITICS_PATTERN = r"[\u064B-\u065F\u0670]"

# 字形バリエーション → 代表字形
ARABIC_LETTER_FORMS: dict[str, str] = {
    "ى": "ي",  # アリフ・マクスーラ → ヤー
    "ة": "ه",  # ター・マルブータ → ハー
    "إ": "ا",  # ハムザ付きアリフ（下） → アリフ
    "أ": "ا",  # ハムザ付きアリフ（上） → アリフ
    "آ": "ا",  # マッダ付きアリフ → アリフ
    "ؤ": "و",  # ハムザ付きワーウ → ワーウ
    "ئ": "ي",  # ハムザ付きヤー → ヤー
}

# "都市, 国" の区切り（ASCIIカンマとアラビア語カンマ）
LOCATION_SEPARATOR_PATTERN = r"[,\u060C]"

# ---------------------------------------------------------------------------
# 候補クエリ
# ---------------------------------------------------------------------------

NATIVE_LANGUAGE = "ar"
DEFAULT_LANGUAGE = "en"

# 入力の先頭・末尾から取り除く前置詞（in / from / to / on）
ARABIC_FILLER_WORDS: tuple[str, ...] = ("في", "من", "إلى", "الى", "على")

# ---------------------------------------------------------------------------
# 候補の絞り込み
# ---------------------------------------------------------------------------

# 一般ルール: 首都・地方中心地でない場合に必要な最低人口
GENERAL_MIN_POPULATION = 10_000

# 衝突ガード: 同一国内の候補に必要な人口
GUARDED_MIN_POPULATION = 100_000
GUARDED_FALLBACK_MIN_POPULATION = 50_000


@dataclass(frozen=True)
class NameCollisionRule:
    """
    都市名が別言語の国名と衝突するケースのルール

    例: アラビア語の「عمان」はヨルダンの首都アンマンとオマーン国の両方を指す
    """

    city_spellings: frozenset[str]  # 対象都市の表記ゆれ
    true_country_names: frozenset[str]  # 都市が属する国の名称（英語・現地語）
    true_country_code: str  # 都市が属する国のISOコード
    colliding_country_phrases: frozenset[str]  # 衝突する国を明示する表現
    colliding_country_tokens: frozenset[str]  # 入力に含まれていれば国を意図しているとみなす語
    # 衝突する国の現地語名（発音記号付き、正規化前の入力と照合）
    colliding_country_native_names: frozenset[str] = frozenset()


AMMAN_COLLISION_RULE = NameCollisionRule(
    city_spellings=frozenset({"amman", "ammān", "عمان", "عمّان", "عَمّان"}),
    true_country_names=frozenset({"jordan", "الأردن", "الاردن", "المملكة الأردنية الهاشمية"}),
    true_country_code="JO",
    colliding_country_phrases=frozenset(
        {"sultanate of oman", "سلطنة عمان", "سلطنة عُمان"}
    ),
    colliding_country_tokens=frozenset({"oman"}),
    # "عُمان", "عُمَان"
    colliding_country_native_names=frozenset({"\u0639\u064f\u0645\u0627\u0646", "\u0639\u064f\u0645\u064e\u0627\u0646"}),
)

NAME_COLLISION_RULES: tuple[NameCollisionRule, ...] = (AMMAN_COLLISION_RULE,)
