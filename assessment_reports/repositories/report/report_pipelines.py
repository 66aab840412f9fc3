"""Report Domain Pipelines - Submission aggregations (SoC)"""
from typing import Dict, List, Optional
from bson import ObjectId
from assessment_reports.utils.query.filter_builder import build_date_range, tenant_scope

# ═══════════════════════════════════════════════════════════════════════════════
# ASSESSMENT SUMMARY PIPELINE
# ═══════════════════════════════════════════════════════════════════════════════

def build_summary_match(tenant_id: str, assessment_id: ObjectId) -> Dict:
    match_filter = tenant_scope(tenant_id)
    match_filter["assessmentId"] = assessment_id
    return match_filter

def build_summary_pipeline(tenant_id: str, assessment_id: ObjectId) -> List[Dict]:
    """
    Two-level reduction of an assessment's submissions into one summary document.

    Stage 1 groups by (assessmentId, status) so $avg/$min/$max only ever see
    the scores of one status group ($avg/$min/$max skip null and missing
    scores). Stage 2 folds the per-status groups into the summary.

    NOTE: avgScore is the mean of the per-status averages, not a mean weighted
    by submission count. With unequal group sizes it differs from the true
    average over all scores.
    """
    return [
        {"$match": build_summary_match(tenant_id, assessment_id)},
        {"$group": {
            "_id": {
                "assessmentId": "$assessmentId",
                "status": "$status"
            },
            "count": {"$sum": 1},
            "avgScore": {"$avg": "$score"},
            "minScore": {"$min": "$score"},
            "maxScore": {"$max": "$score"}
        }},
        {"$group": {
            "_id": "$_id.assessmentId",
            "totalSubmissions": {"$sum": "$count"},
            "avgScore": {"$avg": "$avgScore"},
            "minScore": {"$min": "$minScore"},
            "maxScore": {"$max": "$maxScore"},
            "statusCounts": {"$push": {
                "status": "$_id.status",
                "count": "$count"
            }}
        }},
        {"$project": {
            "_id": 0,
            "assessmentId": "$_id",
            "totalSubmissions": 1,
            "avgScore": {"$round": ["$avgScore", 2]},
            "minScore": 1,
            "maxScore": 1,
            "statusCounts": 1
        }}
    ]

def empty_summary(assessment_id: str) -> Dict:
    """Summary shape for an assessment without submissions"""
    return {
        "assessmentId": assessment_id,
        "totalSubmissions": 0,
        "avgScore": None,
        "minScore": None,
        "maxScore": None,
        "statusCounts": []
    }

# ═══════════════════════════════════════════════════════════════════════════════
# DAILY ACTIVITY PIPELINE
# ═══════════════════════════════════════════════════════════════════════════════

def build_daily_activity_match(
    tenant_id: str,
    assessment_id: ObjectId,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None
) -> Dict:
    match_filter = build_summary_match(tenant_id, assessment_id)
    # in-progress records without submittedAt have no calendar day
    match_filter["submittedAt"] = build_date_range(date_from, date_to) or {"$type": "date"}
    return match_filter

def build_daily_activity_pipeline(
    tenant_id: str,
    assessment_id: ObjectId,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None
) -> List[Dict]:
    """Submissions per UTC calendar day, ascending; days without submissions are absent"""
    return [
        {"$match": build_daily_activity_match(tenant_id, assessment_id, date_from, date_to)},
        {"$group": {
            "_id": {
                "year": {"$year": "$submittedAt"},
                "month": {"$month": "$submittedAt"},
                "day": {"$dayOfMonth": "$submittedAt"}
            },
            "count": {"$sum": 1}
        }},
        {"$sort": {
            "_id.year": 1,
            "_id.month": 1,
            "_id.day": 1
        }},
        {"$project": {
            "_id": 0,
            "date": {"$dateFromParts": {
                "year": "$_id.year",
                "month": "$_id.month",
                "day": "$_id.day"
            }},
            "count": 1
        }}
    ]
