"""레이팅 갱신 예외 (DRF APIException 기반 - 뷰에서 그대로 HTTP 응답으로 변환됨)"""

from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidOutcome(APIException):
    """잘못된 경기 결과 입력 (동일 참가자, 승/무 표시 모호 등)"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "유효하지 않은 경기 결과입니다."
    default_code = "invalid_outcome"


class UnknownParticipant(APIException):
    """레이팅/통계 레코드가 없는 참가자"""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "참가자의 레이팅 정보를 찾을 수 없습니다."
    default_code = "unknown_participant"

    def __init__(self, user_id=None, detail=None, code=None):
        self.user_id = user_id
        if detail is None and user_id is not None:
            detail = f"참가자의 레이팅 정보를 찾을 수 없습니다: user_id={user_id}"
        super().__init__(detail, code)


class RatingUpdateConflict(APIException):
    """동시 수정 감지 (재시도 소진 시 호출자에게 일시적 실패로 전달)"""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "다른 경기 결과가 동시에 반영되고 있습니다. 잠시 후 다시 시도해주세요."
    default_code = "rating_conflict"
