# app/utils/catalog.py

import uuid

from app.models.exercise import BodyPart, Exercise

# Fixed namespace so catalog ids survive restarts
CATALOG_NAMESPACE = uuid.UUID("6f1c3d2e-8a4b-5c7d-9e0f-1a2b3c4d5e6f")

SAMPLE_EXERCISES: dict[BodyPart, tuple[str, ...]] = {
    BodyPart.CHEST: (
        "平板臥推",
        "上斜臥推",
        "下斜臥推",
        "蝴蝶機夾胸",
        "雙槓臂屈伸",
        "伏地挺身",
    ),
    BodyPart.BACK: (
        "高位下拉",
        "坐姿划船",
        "俯身划船",
        "引體向上",
    ),
    BodyPart.LEGS: (
        "深蹲",
        "保加利亞分腿蹲",
        "腿推舉",
        "腿彎舉",
        "站姿提踵",
    ),
    BodyPart.SHOULDERS: (
        "肩推",
        "側平舉",
        "前平舉",
        "繩索面拉",
        "反向飛鳥",
    ),
    BodyPart.ARMS: (
        "二頭彎舉",
        "反握下壓",
        "仰臥三頭肌伸展",
    ),
    BodyPart.ABS: (
        "棒式",
        "捲腹",
        "俄羅斯轉體",
        "懸吊抬腿",
    ),
    BodyPart.CARDIO: (
        "跑步機",
        "飛輪",
        "划船機",
    ),
}


def build_exercise_id(body_part: BodyPart, name: str) -> str:
    return str(uuid.uuid5(CATALOG_NAMESPACE, f"{body_part.value}:{name}"))


def _build_catalog() -> dict[BodyPart, tuple[Exercise, ...]]:
    return {
        part: tuple(
            Exercise(
                id=build_exercise_id(part, name),
                name=name,
                body_part=part,
                image_name=name,
            )
            for name in SAMPLE_EXERCISES.get(part, ())
        )
        for part in BodyPart
    }


CATALOG = _build_catalog()
_BY_ID: dict[str, Exercise] = {ex.id: ex for group in CATALOG.values() for ex in group}


def body_parts() -> list[BodyPart]:
    return list(BodyPart)


def exercises_for(body_part: BodyPart) -> list[Exercise]:
    return list(CATALOG[body_part])


def get_exercise(exercise_id: str) -> Exercise | None:
    return _BY_ID.get(exercise_id)
