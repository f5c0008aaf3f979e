from types import MappingProxyType

from .models import CaseType, Role

WELCOME = """Welcome to the Virtual Courtroom. This case, {title}, falls under the {case_type} category. I am the AI Judge presiding over this matter.

The {opponent_title} arguments will be presented by an AI assistant. Please present your arguments as the {role}. You may cite relevant sections of Indian law and precedents to strengthen your case.

Let us begin with opening statements. The {role} may proceed with their initial arguments."""

FINAL_ARGUMENTS = (
    "We have heard substantial arguments from both sides. The court will now hear final submissions. "
    "{role_title}, please present your final arguments, summarizing your key points and the specific "
    "outcome you seek. After that, we will hear from the {opponent_title} before delivering judgment."
)

DELIBERATION = (
    "The Court will now deliberate on all arguments and evidence presented. The AI Judge is reviewing "
    "relevant legal precedents, assessing the credibility of evidence, and evaluating the strength of "
    "legal arguments from both sides before delivering the final judgment."
)

# ---- Clarification questions ----

CLARIFY_CONFLICTING_PRECEDENT = (
    "The Court notes that both sides have cited the precedent of {precedent}. However, there appears to "
    "be a disagreement about its interpretation or applicability to this case. Could the {role} please "
    "clarify how this precedent specifically supports your position, and address the opposing party's "
    "interpretation?"
)
CLARIFY_LEGAL_BASIS = (
    "The Court appreciates the {role}'s argument, but notes that your conclusion lacks specific reference "
    "to the relevant legal provisions. Could you please cite the specific sections of law that support "
    "your reasoning?"
)
CLARIFY_EVIDENCE = (
    "The {role} has made reference to evidence, but the Court requires more specificity. Please elaborate "
    "on the nature of this evidence, its source, and how it was collected and preserved."
)

# ---- Judge interventions, keyed by case type ----

ARBITER_POOLS = MappingProxyType({
    CaseType.CRIMINAL: (
        "The Prosecution has cited Section 302 IPC for murder. For a conviction under this section, the evidence must establish both actus reus (the criminal act) and mens rea (criminal intent) beyond reasonable doubt. Please elaborate on how your evidence satisfies these elements as per the standards established in Bachan Singh v. State of Punjab (1980).",
        "The Defense argues that the confession is inadmissible under Section 25 of the Indian Evidence Act which prohibits confessions made to police officers. However, Section 164 CrPC provides for confessions recorded by a Magistrate which are admissible. Can you clarify whether the confession in this case falls under either provision, citing the procedural safeguards that were followed or violated?",
        "The {role} has presented arguments regarding chain of custody of evidence. The Supreme Court in Tomaso Bruno v. State of U.P. (2015) emphasized the importance of proper evidence handling. Please specify the exact procedural violations that would render this evidence inadmissible under Sections 65B and 45 of the Indian Evidence Act.",
        "Your argument relies on circumstantial evidence. The Supreme Court in Sharad Birdhichand Sarda v. State of Maharashtra (1984) established that circumstantial evidence must form a complete chain with no gaps, must point exclusively toward the guilt of the accused, and must be incapable of explanation by any other hypothesis. How does your evidence satisfy these stringent requirements?",
        "You've invoked Section 84 IPC regarding unsoundness of mind as a defense. The burden of proving this defense lies with the accused as per Section 105 of the Evidence Act. What specific medical or psychiatric evidence supports this defense, and how does it meet the standards set in Surendra Mishra v. State of Jharkhand (2011) which requires proof of complete impairment of cognitive faculties?",
    ),
    CaseType.CIVIL: (
        "Your argument cites breach of contract, but the opposing party claims frustration under Section 56 of the Contract Act. Can you address how the doctrine of frustration does not apply in this specific scenario?",
        "The documentary evidence you've presented regarding the agreement requires registration under Section 17 of the Registration Act. How do you address the admissibility of this unregistered document?",
        "The {role} has raised the issue of specific performance. In light of the Supreme Court's judgment in Adhunik Steels Ltd. v. Orissa Manganese and Minerals Pvt. Ltd., what makes this case appropriate for specific performance rather than damages?",
        "You've argued about limitation periods for filing this suit. Please address how your claim falls within the prescribed period under the Limitation Act, particularly in reference to when the cause of action arose.",
        "The opposing counsel has raised the defense of force majeure. In light of Energy Watchdog v. CERC (2017), how do you establish that the circumstances do not qualify as force majeure under Indian contract law?",
    ),
    CaseType.PROPERTY: (
        "Your claim to title is based on a registered sale deed, but the opposing party claims adverse possession for over 12 years. How do you address the requirements of adverse possession as clarified in Ravinder Kaur Grewal v. Manjit Kaur (2019)?",
        "The property in question appears to be agricultural land. Have you addressed the restrictions on transfer under the relevant state's land ceiling laws and whether proper permission was obtained?",
        "The {role} has presented revenue records as evidence of ownership. However, the Supreme Court in Suraj Bhan v. Financial Commissioner has held that revenue records are not conclusive proof of title. How do you strengthen your claim beyond these records?",
        "You've argued about a boundary dispute based on the property description in the sale deed. How do you reconcile this with the actual physical possession and demarcation on the ground as per the principles in Faqir Chand v. Ram Rattan?",
        "The opposing party claims that the property transfer lacked proper consideration. Can you address the adequacy of consideration in light of Section 25 of the Transfer of Property Act and relevant case law?",
    ),
    CaseType.FAMILY: (
        "Your petition for divorce cites cruelty under Section 13(1)(ia) of the Hindu Marriage Act. In light of the Supreme Court's judgment in Samar Ghosh v. Jaya Ghosh, how do the specific instances you've mentioned qualify as legal cruelty?",
        "The issue of child custody must be decided based on the 'welfare of the child' principle established in Rosy Jacob v. Jacob A. Chakramakkal. How does your claim for custody serve the best interests of the minor children?",
        "The {role} has raised the issue of maintenance under Section 125 CrPC. How do you address the quantum of maintenance in light of the guidelines established by the Supreme Court in Rajnesh v. Neha (2020)?",
        "You've argued about division of matrimonial property. Given that Indian law does not explicitly recognize the concept of community property, what legal basis supports your claim for division of assets acquired during marriage?",
        "The opposing party claims that the marriage was void ab initio due to non-compliance with essential ceremonies. How do you establish the validity of this marriage under Section 7 of the Hindu Marriage Act?",
    ),
    CaseType.CONSTITUTIONAL: (
        "Your challenge to the impugned provision is based on Article 14. How does this classification fail the test of reasonable classification established in State of West Bengal v. Anwar Ali Sarkar?",
        "The state argues that restrictions on the fundamental right are reasonable under Article 19(6). How do you establish that these restrictions fail the proportionality test laid down in Modern Dental College v. State of MP?",
        "The {role} has invoked Article 21's right to privacy. In light of Justice K.S. Puttaswamy v. Union of India, how does the impugned action violate the specific facets of privacy identified by the Supreme Court?",
        "Your argument involves the interpretation of Article 25 regarding religious practices. How do you distinguish between essential and non-essential religious practices as per the test established in The Commissioner, Hindu Religious Endowments v. Sri Lakshmindra Thirtha Swamiar?",
        "The opposing counsel relies on the doctrine of constitutional silence. How do you address this in light of the basic structure doctrine established in Kesavananda Bharati v. State of Kerala?",
    ),
    CaseType.CORPORATE: (
        "Your petition alleges oppression under Section 241 of the Companies Act. In light of Tata Consultancy Services v. Cyrus Investments, what specific actions of the majority shareholders constitute oppression rather than legitimate business decisions?",
        "The respondents invoke the business judgment rule as a defense. How do you establish that the directors' actions fall outside the protection of this rule as per the standards in Miheer H. Mafatlal v. Mafatlal Industries?",
        "The {role} has raised issues regarding corporate governance norms. Can you specify which provisions of the Companies Act or SEBI regulations have been violated and how these violations have caused prejudice?",
        "You've argued about the validity of board resolutions. How do you address the procedural requirements under Section 179 of the Companies Act and the company's Articles of Association?",
        "The opposing party claims ratification of the impugned actions by shareholder approval. How do you challenge the validity of this approval in light of the principles established in Foss v. Harbottle and its exceptions?",
    ),
    CaseType.OTHER: (
        "Thank you for your argument. Could you please elaborate on the legal basis for your claim? Please cite specific sections of the relevant law and Supreme Court precedents that support your position.",
        "I'd like to clarify a point in your argument. What specific evidence supports your assertion, and how does this evidence meet the standard of proof required in this type of case?",
        "Both sides have presented arguments on the legal interpretation. Let me ask a specific question to the {role}: How do you reconcile your interpretation with the contrary precedents cited by the opposing counsel?",
        "The court would like to understand more about the procedural aspects of your case. Can you address any potential jurisdictional or limitation issues that might affect the admissibility of this matter?",
        "Your argument raises important questions about the burden of proof. Please clarify which party bears the burden on each contested issue and whether that burden has been discharged based on the evidence presented.",
        "We are moving toward final arguments in this matter. Please summarize your strongest legal points and the specific relief you are seeking from this court.",
    ),
})

# ---- Opposing counsel rebuttals, keyed by case type and the role arguing ----

OPPOSING_POOLS = MappingProxyType({
    CaseType.CRIMINAL: {
        Role.PROSECUTION: (
            "The prosecution contends that the evidence clearly establishes the elements of the offense beyond reasonable doubt. The defendant's actions meet all criteria under Section 302 of the IPC.",
            "We submit that witness testimony and documentary evidence confirm the accused's presence at the scene and involvement in the alleged crime.",
            "The prosecution draws the court's attention to the established chain of events that demonstrates premeditation and intent as required under the IPC.",
            "With respect, the defense's argument fails to account for the material evidence collected from the scene which directly implicates the accused.",
            "The prosecution would like to emphasize that similar cases have resulted in convictions, as seen in State v. Sharma (2018) where the Supreme Court upheld the lower court's judgment.",
        ),
        Role.DEFENSE: (
            "The defense maintains that the prosecution has failed to establish guilt beyond reasonable doubt, which is the standard required in criminal proceedings under Indian law.",
            "We contend that the evidence presented is circumstantial at best and does not conclusively link our client to the alleged offense.",
            "My client's actions do not satisfy the elements required under the relevant sections of the IPC, particularly regarding mens rea (criminal intent).",
            "The defense would like to highlight procedural irregularities in the collection of evidence, which brings its admissibility into question under Section 25 of the Indian Evidence Act.",
            "We cite the precedent established in Vishwanath v. State of UP (2015) where the Supreme Court held that similar evidence was insufficient for conviction.",
        ),
    },
    CaseType.CIVIL: {
        Role.PROSECUTION: (
            "The plaintiff submits that the documentary evidence clearly establishes breach of contract under Section 73 of the Indian Contract Act.",
            "We draw the court's attention to the terms of the agreement which were explicitly violated by the defendant as evidenced by the correspondence.",
            "The plaintiff contends that the defendant's failure to perform their obligations has resulted in quantifiable damages that must be compensated.",
            "With respect, the defendant's argument regarding force majeure is not applicable as the circumstances do not meet the threshold established in M/s Halliburton Offshore Services Inc. v. Vedanta Limited (2020).",
            "We rely on the principle established in Hadley v. Baxendale, which has been consistently upheld by Indian courts in cases of contractual breach.",
        ),
        Role.DEFENSE: (
            "The defendant maintains that there was no valid contract as the essential elements under Section 10 of the Indian Contract Act were not satisfied.",
            "We contend that even if a contract existed, the plaintiff has failed to demonstrate any actual loss resulting from the alleged breach.",
            "The defendant's actions were justified under the doctrine of frustration as codified in Section 56 of the Contract Act.",
            "We highlight that the plaintiff failed to mitigate their damages as required under established principles of contract law.",
            "We cite the precedent in Energy Watchdog v. CERC (2017) where the Supreme Court clarified the application of force majeure in contractual disputes.",
        ),
    },
    CaseType.PROPERTY: {
        Role.PROSECUTION: (
            "The plaintiff asserts clear title to the property based on the registered sale deed executed in accordance with the Transfer of Property Act.",
            "We submit that the defendant's occupation of the property is without any legal basis and constitutes trespass.",
            "The plaintiff draws the court's attention to the revenue records which clearly identify our client as the rightful owner.",
            "With respect, the defendant's claim of adverse possession fails to meet the statutory period of 12 years as required under the Limitation Act.",
            "We rely on the judgment in Ravinder Kaur Grewal v. Manjit Kaur (2019) where the Supreme Court clarified the requirements for establishing title.",
        ),
        Role.DEFENSE: (
            "The defendant maintains that they have been in peaceful, continuous and open possession of the property for over 12 years, thereby acquiring rights through adverse possession.",
            "We contend that the plaintiff's title documents contain material irregularities that render them legally ineffective.",
            "The defendant's possession is based on a valid oral gift which is recognized under Section 123 of the Transfer of Property Act.",
            "We highlight that the plaintiff has acquiesced to the defendant's possession for years, creating an estoppel against their current claim.",
            "We cite the precedent in Nair Service Society v. K.C. Alexander where the Supreme Court established the principles governing property disputes of this nature.",
        ),
    },
    CaseType.FAMILY: {
        Role.PROSECUTION: (
            "The petitioner submits that the grounds for divorce under Section 13 of the Hindu Marriage Act have been clearly established through evidence.",
            "We draw the court's attention to the documented instances of cruelty which satisfy the legal threshold established by the Supreme Court.",
            "The petitioner contends that the welfare of the children would be best served by granting custody to our client as demonstrated by the assessment report.",
            "With respect, the respondent's claim for maintenance fails to account for their own earning capacity and financial resources.",
            "We rely on the judgment in Naveen Kohli v. Neelu Kohli where the Supreme Court recognized irretrievable breakdown as a ground for divorce.",
        ),
        Role.DEFENSE: (
            "The respondent maintains that the alleged instances of cruelty are exaggerated and do not meet the threshold established in V. Bhagat v. D. Bhagat.",
            "We contend that the best interests of the children would be served by granting custody to our client who has been their primary caregiver.",
            "The respondent is entitled to maintenance under Section 125 of the CrPC based on the significant income disparity between the parties.",
            "We highlight that the petitioner has not approached the court with clean hands, having concealed material facts about their own conduct.",
            "We cite the precedent in Rajnesh v. Neha where the Supreme Court established comprehensive guidelines for maintenance in matrimonial disputes.",
        ),
    },
    CaseType.CONSTITUTIONAL: {
        Role.PROSECUTION: (
            "The petitioner submits that the impugned provision violates the fundamental right to equality guaranteed under Article 14 of the Constitution.",
            "We draw the court's attention to the arbitrary classification created by the legislation which fails the test of reasonable classification.",
            "The petitioner contends that the restriction imposed on the fundamental right is not reasonable and fails the proportionality test established in Modern Dental College v. State of MP.",
            "With respect, the state's argument regarding public interest does not justify the infringement of constitutionally protected rights.",
            "We rely on the judgment in Navtej Johar v. Union of India where the Supreme Court emphasized the transformative nature of the Constitution.",
        ),
        Role.DEFENSE: (
            "The state maintains that the classification is based on intelligible differentia and has a rational nexus with the object sought to be achieved.",
            "We contend that the restriction on fundamental rights is reasonable and falls within the permissible limits prescribed in the Constitution.",
            "The impugned provision serves a compelling state interest and is the least restrictive means of achieving the legislative objective.",
            "We highlight that the court should exercise judicial restraint in matters of policy as established in numerous constitutional precedents.",
            "We cite the doctrine of presumption of constitutionality which requires the court to interpret legislation in a manner that upholds its validity.",
        ),
    },
    CaseType.CORPORATE: {
        Role.PROSECUTION: (
            "The petitioner submits that the actions of the board violated Section 166 of the Companies Act which codifies directors' fiduciary duties.",
            "We draw the court's attention to the clear breach of corporate governance norms as evidenced by the board minutes and financial statements.",
            "The petitioner contends that the minority shareholders' rights have been oppressed under Section 241 of the Companies Act.",
            "With respect, the respondents' business judgment defense fails as their decisions were not made in good faith or in the best interest of the company.",
            "We rely on the judgment in Tata Consultancy Services v. Cyrus Investments where the Supreme Court clarified the scope of oppression and mismanagement.",
        ),
        Role.DEFENSE: (
            "The respondents maintain that their actions are protected by the business judgment rule as they were taken in good faith after due deliberation.",
            "We contend that the petitioner has failed to demonstrate any actual prejudice or loss resulting from the alleged violations.",
            "The board's decisions were approved by the requisite majority of shareholders in accordance with the Companies Act and the articles of association.",
            "We highlight that courts should not interfere with commercial decisions of the board unless there is evidence of fraud or bad faith.",
            "We cite the precedent in Miheer H. Mafatlal v. Mafatlal Industries where the Supreme Court established principles for judicial review of corporate actions.",
        ),
    },
    CaseType.OTHER: {
        Role.PROSECUTION: (
            "The prosecution contends that the evidence clearly establishes all elements of the claim beyond reasonable doubt.",
            "We submit that documentary evidence and testimony support our position on all material points.",
            "The prosecution draws the court's attention to the established facts that demonstrate our case.",
            "With respect, the defense's argument fails to account for the substantial evidence which supports our position.",
            "The prosecution would like to emphasize that similar cases have resulted in favorable judgments for parties in our position.",
        ),
        Role.DEFENSE: (
            "The defense maintains that the opposing party has failed to establish their case to the required standard of proof.",
            "We contend that the evidence presented is insufficient and does not conclusively support the claims made.",
            "The defense's position is supported by both the facts and the applicable legal principles in this matter.",
            "We highlight procedural and substantive issues in the opposing party's case that undermine their position.",
            "We cite relevant precedents that support our interpretation of the law as applied to these facts.",
        ),
    },
})

# ---- Attachment observations ----
# Rules are (filename substrings, media type prefix, text); first match wins,
# the last entry is the fallback.

ARBITER_ATTACHMENT_NOTES = (
    (("evidence", "exhibit"), None,
     "This document appears to contain key evidence. The court notes the submission and will consider it in the final judgment."),
    (("witness", "testimony"), None,
     "Witness testimony provided. The credibility and relevance of this testimony will be evaluated in context of other evidence."),
    (("report", "analysis"), None,
     "Expert report received. The court acknowledges the technical analysis provided in this document."),
    (("contract", "agreement"), None,
     "Legal document submitted. The court will examine the terms and conditions outlined in this document."),
    (("photo", "image"), "image/",
     "Visual evidence submitted. The court will consider the authenticity and context of this visual evidence."),
    (("statement", "affidavit"), None,
     "Sworn statement received. The court will evaluate the credibility and relevance of this testimony."),
    ((), None,
     "Document received. The court will review its contents and determine its relevance to the case."),
)

DOCUMENT_ANALYSIS_HEADER = "\n\n**Document Analysis:**\n"

# ---- Judgment phrases ----

EVIDENCE_POINTS = (
    "the documentary evidence which has been properly authenticated as per Section 65B of the Indian Evidence Act",
    "the consistent and credible witness testimonies which have withstood rigorous cross-examination",
    "the forensic analysis conducted by qualified experts in accordance with Section 45 of the Indian Evidence Act",
    "the expert opinions which satisfy the requirements of scientific validity and reliability",
    "the circumstantial evidence which forms a complete chain without gaps as required by the Supreme Court in Sharad Birdhichand Sarda v. State of Maharashtra",
    "the financial records which have been verified and authenticated by competent authorities",
    "the surveillance footage which has been properly preserved and authenticated in accordance with Section 65B of the Indian Evidence Act",
    "the authenticated communications which have been recovered and verified following proper legal procedures",
    "the medical reports prepared by qualified medical professionals in accordance with Section 45 of the Indian Evidence Act",
    "the official records maintained by public servants in the discharge of their official duties as per Section 35 of the Indian Evidence Act",
    "the DNA evidence which has been collected, preserved, and analyzed following scientific protocols and legal procedures",
    "the ballistic reports which establish a conclusive link between the recovered weapon and the crime",
)

DEFENSE_POINTS = (
    "procedural irregularities in the investigation which violate the guidelines established in D.K. Basu v. State of West Bengal",
    "lack of mens rea (criminal intent) which is an essential element for the offense as established in Babu v. State of Kerala",
    "absence of direct evidence linking the accused to the crime, with the circumstantial evidence being insufficient to form a complete chain",
    "alternative explanations for the evidence which create reasonable doubt as to the accused's guilt",
    "witness credibility issues including contradictions and improvements in testimony as highlighted in Vadivelu Thevar v. State of Madras",
    "chain of custody concerns regarding key evidence which raise doubts about its integrity and reliability",
    "statutory interpretation of the relevant provisions which do not support the prosecution's case",
    "jurisdictional challenges which affect the validity of the proceedings",
    "constitutional protections under Articles 20 and 21 which have been violated during the investigation",
    "precedential inconsistencies with established Supreme Court judgments on similar factual matrices",
    "inadmissibility of the confession under Section 25 of the Indian Evidence Act as it was made to a police officer",
    "violation of the accused's right against self-incrimination protected under Article 20(3) of the Constitution",
    "failure to conduct proper identification proceedings as required by the Supreme Court in Sidhartha Vashisht v. State (NCT of Delhi)",
)

CRIMINAL_GUILTY_REASONING = """**COMPREHENSIVE JUDGMENT ANALYSIS**

In the matter of {title}, after meticulous examination of all arguments and evidence presented in this criminal case, the Court finds that the prosecution has established the guilt of the accused beyond reasonable doubt as required under Section 101 of the Indian Evidence Act.

**Key Prosecution Arguments:**
{prosecution_points}

**Key Defense Arguments:**
{defense_points}

**Court's Analysis:**
The evidence presented, particularly regarding {evidence_point}, is compelling and forms a complete chain of circumstances that points exclusively to the guilt of the accused, satisfying the criteria established in Sharad Birdhichand Sarda v. State of Maharashtra (1984). The Court has carefully considered the defense's arguments regarding {defense_point} but finds them insufficient to create reasonable doubt when evaluated against the totality of evidence.{violations}

The prosecution has successfully established both actus reus (criminal act) and mens rea (criminal intent) required for the offense."""

CRIMINAL_GUILTY_VIOLATIONS = (
    "\n\nThe Court notes the following procedural concerns raised during the proceedings: {violations}. "
    "However, these issues do not materially impact the reliability of the core evidence establishing guilt."
)

CRIMINAL_ACQUITTAL_REASONING = """**COMPREHENSIVE JUDGMENT ANALYSIS**

In the matter of {title}, after thorough examination of all arguments and evidence presented in this criminal case, the Court finds that the prosecution has failed to establish the guilt of the accused beyond reasonable doubt as required by Section 101 of the Indian Evidence Act and affirmed in K. Venkateshwarlu v. State of Andhra Pradesh (2012).

**Key Prosecution Arguments:**
{prosecution_points}

**Key Defense Arguments:**
{defense_points}

**Court's Analysis:**
The defense has successfully raised significant doubts regarding {defense_point}, which the prosecution has failed to address adequately. Furthermore, the prosecution's evidence concerning {evidence_point} was found to be insufficient, inconclusive, or inadmissible under the relevant provisions of the Indian Evidence Act.{violations}

The Court is guided by the cardinal principle of criminal jurisprudence that the benefit of doubt must go to the accused, as established in Kali Ram v. State of Himachal Pradesh (1973). The prosecution bears the burden of proving every ingredient of the offense beyond reasonable doubt, and in this case, that burden has not been discharged."""

CRIMINAL_ACQUITTAL_VIOLATIONS = (
    "\n\nThe Court notes with concern the following procedural violations: {violations}. "
    "These irregularities have significantly impacted the admissibility and reliability of key prosecution evidence."
)

NO_ARGUMENTS = "No significant arguments presented."
NO_SUBSTANTIVE_ARGUMENTS = "No substantive arguments identified."

# Non-criminal judgments: (verdict for, verdict against, reasoning for, reasoning against,
# relief when upheld). Reasoning is prefixed with the case title.
CASE_JUDGMENTS = MappingProxyType({
    CaseType.CIVIL: (
        "Claim Upheld", "Claim Dismissed",
        "After evaluating the evidence and arguments presented in this civil matter, the Court finds in favor of the plaintiff. The plaintiff has successfully established their claim on a preponderance of probabilities. The documentary evidence regarding {evidence_point} clearly supports the plaintiff's position, and the defendant's arguments concerning {defense_point} were not sufficiently substantiated.",
        "After evaluating the evidence and arguments presented in this civil matter, the Court finds in favor of the defendant. The plaintiff has failed to establish their claim on a preponderance of probabilities. The defendant's arguments regarding {defense_point} were found to be legally sound, and the plaintiff's evidence concerning {evidence_point} was insufficient to support their claim.",
        "The defendant is directed to pay damages of ₹5,00,000 to the plaintiff along with interest at 6% per annum from the date of filing till realization.",
    ),
    CaseType.PROPERTY: (
        "Title Confirmed", "Claim Rejected",
        "After examining the documentary evidence and arguments presented in this property dispute, the Court confirms the plaintiff's title to the property in question. The sale deed, revenue records, and other documents clearly establish the plaintiff's ownership rights. The defendant's claim of {defense_point} was not supported by sufficient evidence or legal basis.",
        "After examining the documentary evidence and arguments presented in this property dispute, the Court rejects the plaintiff's claim to the property in question. The defendant has successfully established {defense_point}, which defeats the plaintiff's claim. The plaintiff's reliance on {evidence_point} was found to be legally insufficient to establish title.",
        "The defendant is directed to vacate the property within 30 days and pay mesne profits at the rate of ₹10,000 per month for the period of unauthorized occupation.",
    ),
    CaseType.FAMILY: (
        "Petition Granted", "Petition Dismissed",
        "After considering the evidence and arguments presented in this family matter, the Court grants the petitioner's prayer. The petitioner has successfully established grounds under the relevant family law statutes. The evidence regarding {evidence_point} was found to be credible and sufficient, while the respondent's contentions about {defense_point} were not adequately substantiated.",
        "After considering the evidence and arguments presented in this family matter, the Court dismisses the petitioner's prayer. The petitioner has failed to establish sufficient grounds under the relevant family law statutes. The respondent's arguments regarding {defense_point} were found to be credible, and the petitioner's evidence concerning {evidence_point} was insufficient or inconsistent.",
        "The marriage between the parties is hereby dissolved. The petitioner is granted custody of the minor children with visitation rights to the respondent. The respondent shall pay maintenance of ₹25,000 per month.",
    ),
    CaseType.CONSTITUTIONAL: (
        "Provision Unconstitutional", "Provision Constitutional",
        "After a thorough analysis of the constitutional questions raised in this matter, the Court finds that the impugned provision violates the fundamental rights guaranteed under the Constitution of India. The petitioner has successfully demonstrated that the provision fails the test of reasonable classification under Article 14 and imposes unreasonable restrictions on fundamental rights. The state's justification regarding {defense_point} does not satisfy the proportionality standard established by the Supreme Court.",
        "After a thorough analysis of the constitutional questions raised in this matter, the Court finds that the impugned provision does not violate the fundamental rights guaranteed under the Constitution of India. The state has successfully demonstrated that the provision creates a reasonable classification with a rational nexus to the object sought to be achieved. The petitioner's arguments regarding {evidence_point} do not establish any violation of constitutional principles.",
        "The impugned provision is hereby declared unconstitutional and struck down. The state is directed to frame new guidelines in accordance with constitutional principles within 6 months.",
    ),
    CaseType.CORPORATE: (
        "Petition Allowed", "Petition Dismissed",
        "After examining the corporate governance issues raised in this matter, the Court finds in favor of the petitioner. The evidence clearly establishes violations of the Companies Act provisions regarding directors' duties and shareholder rights. The respondents' actions concerning {evidence_point} constitute oppression and mismanagement, and their business judgment defense regarding {defense_point} is not sustainable in light of the evidence presented.",
        "After examining the corporate governance issues raised in this matter, the Court finds in favor of the respondents. The petitioner has failed to establish any violation of the Companies Act provisions or oppression and mismanagement. The respondents' business judgment regarding {defense_point} appears to have been exercised in good faith and in the best interest of the company. The petitioner's allegations concerning {evidence_point} were not substantiated by sufficient evidence.",
        "The respondents are directed to buy out the petitioner's shares at fair market value as determined by an independent valuer. The respondents shall also pay costs of ₹5,00,000 to the petitioner.",
    ),
    CaseType.OTHER: (
        "In Favor of Plaintiff", "In Favor of Defendant",
        "After careful consideration of all arguments and evidence presented by both sides, and applying the relevant legal principles and precedents, the court has reached its decision. The plaintiff's arguments were found to be more compelling and legally sound.",
        "After careful consideration of all arguments and evidence presented by both sides, and applying the relevant legal principles and precedents, the court has reached its decision. The defendant's arguments were found to be more compelling and legally sound.",
        "The defendant is directed to comply with the plaintiff's demands and pay the costs of the proceedings.",
    ),
})

CASE_TITLE_PREFIX = "In the matter of {title}: "

# ---- Sentencing ----

SENTENCE_DEATH = (
    "After considering both aggravating factors ({aggravating}) and the absence of significant mitigating "
    "circumstances, the Court finds this case falls within the 'rarest of rare' category. The accused is "
    "sentenced to death under Section 302 of the IPC, following the principles established in Bachan Singh "
    "v. State of Punjab (1980) and Machhi Singh v. State of Punjab (1983)."
)
SENTENCE_LIFE_MITIGATED = (
    "The accused is sentenced to imprisonment for life and a fine of ₹75,000 under Section 302 of the IPC. "
    "While the Court acknowledges the aggravating factors ({aggravating}), it has also considered mitigating "
    "circumstances ({mitigating}) as outlined in Santosh Kumar Bariyar v. State of Maharashtra (2009)."
)
SENTENCE_LIFE = (
    "The accused is sentenced to imprisonment for life and a fine of ₹100,000 under Section 302 of the IPC. "
    "The Court has considered the heinous nature of the crime and the principles established in Bachan Singh "
    "v. State of Punjab (1980) regarding sentencing in murder cases."
)
SENTENCE_CULPABLE_HOMICIDE = (
    "The accused is sentenced to imprisonment for 10 years and a fine of ₹50,000 under Section 304 of the IPC "
    "(Culpable homicide not amounting to murder). The Court has considered that while the accused caused "
    "death, the circumstances fall short of murder as defined under Section 300 IPC."
)
SENTENCE_RAPE = (
    "The accused is sentenced to rigorous imprisonment for 20 years and a fine of ₹200,000 under Section 376 "
    "of the IPC (Punishment for Rape), with the fine amount to be paid as compensation to the victim as per "
    "Section 357 CrPC. The Court has considered the trauma inflicted on the victim and the need for deterrence "
    "as outlined in Mukesh & Anr. v. State (NCT of Delhi) (2017)."
)
SENTENCE_DEFAULT = (
    "The accused is sentenced to rigorous imprisonment for 7 years and a fine of ₹50,000 under the applicable "
    "sections of the IPC. The Court has balanced the gravity of the offense with proportionate punishment."
)

POST_VERDICT_CONVICTION = (
    "The accused has the right to appeal this conviction and sentence before the High Court within 90 days "
    "as per Section 374 of the CrPC. If new evidence emerges that was not available during trial, a review "
    "petition may be considered under appropriate provisions."
)
POST_VERDICT_ACQUITTAL = (
    "The prosecution has the right to appeal this acquittal before the High Court within the statutory period "
    "as per Section 378 of the CrPC. The accused is entitled to be released forthwith if not required in any "
    "other case."
)
POST_VERDICT_DEFAULT = (
    "The court recommends that both parties consider the option of appeal if they find this judgment "
    "unsatisfactory."
)

JUDGMENT_TURN = """**JUDGMENT**

{reasoning}

Verdict: {verdict}

{sentencing}**Post-Verdict Considerations:**
{post_verdict}"""
