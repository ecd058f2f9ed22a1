"""Canonical column concepts and their accepted source spellings.

Each concept names one semantic field of a claims or line sheet. The column
resolver tries a concept's literal names first (exactly, then ignoring case
and repeated whitespace) and falls back to its keyword groups: a header
matches a group when its lowercase form contains every token of the group.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Concept(BaseModel):
    """A canonical field with the header spellings it may appear under."""

    model_config = ConfigDict(frozen=True)

    name: str
    names: tuple[str, ...]
    keywords: tuple[tuple[str, ...], ...] = ()


# Claim identifier candidates, tried in this order before any keyword scan
CLAIM_ID_CONCEPTS: tuple[Concept, ...] = (
    Concept(name="claim_id", names=("clmId", "claimId", "ClaimId", "Claim ID", "claim_id", "CLM_ID")),
    Concept(name="claim_number", names=("Claim Number", "claimNumber", "clmNum", "claim_number", "Claim No")),
    Concept(name="claim_identifier", names=("Claim Identifier", "claimIdentifier", "claim_identifier")),
    Concept(
        name="source",
        names=("Source", "source", "SOURCE"),
        keywords=(("clmid",), ("claimid",), ("claim", " id"), ("claim", "_id"), ("claim", "number"), ("claim", "identifier")),
    ),
)

RISK_LEVEL = Concept(name="risk_level", names=("Priority", "priority", "Risk Level", "riskLevel", "Risk"))
AUDIT_FLAG = Concept(
    name="audit_flag",
    names=("Audit Flag", "auditFlag", "AuditFlag", "Audit_Flag"),
    keywords=(("audit", "flag"),),
)

CLAIM_CONCEPTS: dict[str, Concept] = {
    concept.name: concept
    for concept in (
        RISK_LEVEL,
        AUDIT_FLAG,
        Concept(name="score", names=("Score", "score")),
        Concept(name="adjudication_indicator", names=("aaInd", "AA Ind", "Adjudication Indicator")),
        Concept(name="account_number", names=("acctNum", "Account Number")),
        Concept(name="bill_type", names=("billTyCd", "Bill Type")),
        Concept(name="claim_begin_date", names=("clmBeginDt", "Claim Begin Date")),
        Concept(name="claim_end_date", names=("clmEndDt", "Claim End Date")),
        Concept(name="claim_type", names=("clmTyCd", "Claim Type")),
        Concept(name="form_type", names=("formTyCd", "Form Type")),
        Concept(name="submission_method", names=("paperEdiCd", "Submission Method")),
        Concept(name="received_at", names=("rcvdTs", "Received Date", "Received Timestamp")),
        Concept(name="provider_city", names=("billProv_city(pie chart)", "billProv_city", "Billing Provider City")),
        Concept(name="provider_specialty", names=("billProv_dervCpfTyCd2", "Billing Provider Specialty")),
        Concept(name="provider_state", names=("billProv_stCd", "Billing Provider State")),
        Concept(name="provider_name", names=("billProv_nm", "Billing Provider Name")),
        Concept(name="provider_participation", names=("billProv_dervParInd", "Participation Indicator")),
        Concept(name="network_code", names=("billProv_ntCd", "Network Code")),
        Concept(name="total_charged_amount", names=("clmAmt_totChrgAmt", "Total Charged Amount")),
        Concept(name="total_allowed_amount", names=("clmAmt_totAllowAmt", "Total Allowed Amount")),
        Concept(name="patient_age", names=("patDemo_patAge", "Patient Age")),
        Concept(name="patient_gender", names=("patDemo_patGndr", "Patient Gender")),
        Concept(name="benefit_option", names=("benopt", "Benefit Option")),
        Concept(
            name="appeal_id",
            names=("Appeal ID", "appealId", "AppealId", "AppealID", "Appeal_ID"),
            keywords=(("appeal", "id"),),
        ),
        Concept(
            name="appeal_reason",
            names=("Appeal Reason", "appealReason", "AppealReason", "Appeal_Reason"),
            keywords=(("appeal", "reason"),),
        ),
        Concept(
            name="benefit_plan_updated",
            names=("Benefit plan update date", "benefitPlanUpdateDate", "Benefit_Plan_Update_Date"),
            keywords=(("benefit", "plan", "update", "date"),),
        ),
        Concept(
            name="provider_contract_updated",
            names=(
                "Billing Provider contract update date",
                "billingProviderContractUpdateDate",
                "Billing_Provider_Contract_Update_Date",
            ),
            keywords=(("billing", "provider", "contract", "update", "date"),),
        ),
        Concept(
            name="claim_status",
            names=("Claim Status", "claimStatus", "ClaimStatus", "Claim_Status"),
            keywords=(("claim", "status"),),
        ),
        Concept(
            name="claim_paid_date",
            names=("Claim Paid date", "claimPaidDate", "ClaimPaidDate", "Claim_Paid_Date"),
            keywords=(("claim", "paid", "date"),),
        ),
        Concept(
            name="historical_adj_rate",
            names=("historical_adj_rate_by_version", "historicalAdjRateByVersion", "historical adj rate by version"),
            keywords=(("historical", "adj", "rate", "version"), ("historical_adj_rate",)),
        ),
    )
}

LINE_CONCEPTS: dict[str, Concept] = {
    concept.name: concept
    for concept in (
        Concept(name="claim_line_number", names=("clmLnNum", "lineNum", "Line Number", "Claim Line Number")),
        Concept(name="edi_line_number", names=("ediLnNum", "seqNum", "EDI Line Number")),
        Concept(name="charged_amount", names=("chrgAmt", "Charged Amount", "Charge Amount")),
        Concept(name="paid_amount", names=("paidAmt", "Paid Amount")),
        Concept(name="covered_amount", names=("cvrdAmt", "Covered Amount")),
        Concept(name="coinsurance_amount", names=("coinsAmt", "Coinsurance Amount")),
        Concept(name="deductible_amount", names=("dedAmt", "Deductible Amount")),
        Concept(name="line_begin_date", names=("lnBeginDt", "beginDt", "Line Begin Date")),
        Concept(name="line_end_date", names=("lnEndDt", "endDt", "Line End Date")),
        Concept(name="procedure_code", names=("procCd", "Procedure Code")),
        Concept(name="diagnosis_code", names=("diagCd", "Diagnosis Code")),
        Concept(name="revenue_code", names=("revnuCd", "revCd", "Revenue Code")),
        Concept(name="place_of_service", names=("posCd", "Place of Service")),
        Concept(name="pre_auth_indicator", names=("preAuthInd", "Pre-Auth Indicator")),
        Concept(name="room_type", names=("rmTyp", "Room Type")),
        Concept(name="service_id", names=("serviceId", "Service ID")),
        Concept(name="reason_not_covered", names=("rncCd", "Reason Not Covered")),
        Concept(name="ndc", names=("ndc", "NDC")),
        Concept(name="drug_units", names=("drugUnits", "Drug Units")),
        Concept(name="drug_uom", names=("drugUom", "Drug UOM")),
        Concept(name="count", names=("count", "qty", "Count")),
        Concept(name="uom", names=("uom", "UOM")),
    )
}
