import os
import re
from datetime import datetime
from pathlib import Path
from xml.sax.saxutils import escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from core.questionnaire import QUESTIONS
from core.tier_content import SECTION_TITLES
from models.assessment import AnswerRecord, Step, Tier, TierResult
from config.settings import settings
from loguru import logger

DARK_BLUE = colors.HexColor("#0D2B45")
BLUE = colors.HexColor("#1565C0")
GRAY = colors.HexColor("#F5F7FA")
TIER_COLORS = {
    Tier.TIER_1: colors.HexColor("#388E3C"),
    Tier.TIER_2: colors.HexColor("#F57C00"),
    Tier.TIER_3: colors.HexColor("#D32F2F"),
}

class PDFReportGenerator:
    def __init__(self, result: TierResult, answers: AnswerRecord,
                 organization: str = None, output_dir=None):
        self.result = result
        self.answers = answers
        self.organization = organization or settings.organization_label()
        self.output_dir = Path(output_dir or settings.REPORT_OUTPUT_DIR)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self) -> str:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        slug = re.sub(r"\W+", "_", self.organization).strip("_") or "organization"
        path = os.path.join(self.output_dir, f"NIS2_Exposure_{slug}_{ts}.pdf")
        doc = SimpleDocTemplate(path, pagesize=A4,
                                rightMargin=0.75*inch, leftMargin=0.75*inch,
                                topMargin=0.75*inch, bottomMargin=0.75*inch)
        story = []
        story += self._cover()
        story += self._answers()
        story += self._score()
        story += self._content()
        doc.build(story)
        logger.info(f"PDF generated: {path}")
        return path

    def _h1(self, text):
        return Paragraph(f"<font color='#0D2B45'><b>{escape(text)}</b></font>",
                         ParagraphStyle("h1", fontSize=16, spaceAfter=8, spaceBefore=16))

    def _body(self, text):
        return Paragraph(escape(text), ParagraphStyle("body", fontSize=10, leading=14,
                                                      alignment=TA_JUSTIFY, spaceAfter=8))

    def _cover(self):
        title_style = ParagraphStyle("title", fontSize=22, textColor=colors.white,
                                     alignment=TA_CENTER, fontName="Helvetica-Bold", leading=28)
        header = Table([[Paragraph(
            f'<b>{escape(settings.APP_NAME)}</b><br/>'
            f'<font size="14">{escape(self.organization)}</font>', title_style
        )]], colWidths=[7*inch])
        header.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,-1), DARK_BLUE),
            ("ALIGN", (0,0), (-1,-1), "CENTER"),
            ("TOPPADDING", (0,0), (-1,-1), 30),
            ("BOTTOMPADDING", (0,0), (-1,-1), 30),
        ]))
        badge = Table([[self.result.content.label]], colWidths=[7*inch])
        badge.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,-1), TIER_COLORS.get(self.result.tier, colors.gray)),
            ("TEXTCOLOR", (0,0), (-1,-1), colors.white),
            ("FONTNAME", (0,0), (-1,-1), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,-1), 14),
            ("ALIGN", (0,0), (-1,-1), "CENTER"),
            ("TOPPADDING", (0,0), (-1,-1), 10),
            ("BOTTOMPADDING", (0,0), (-1,-1), 10),
        ]))
        date = Paragraph(datetime.now().strftime("%d/%m/%Y"),
                         ParagraphStyle("date", fontSize=9, alignment=TA_CENTER))
        return [header, Spacer(1, 0.2*inch), badge, Spacer(1, 0.1*inch), date]

    def _answers(self):
        els = [self._h1("Réponses")]
        infra = self.answers.digital_infrastructure
        flag_labels = QUESTIONS[Step.DIGITAL_INFRASTRUCTURE]["flags"]
        data = [
            ["Question", "Réponse"],
            [QUESTIONS[Step.ENTITY_SIZE]["title"], self._option(Step.ENTITY_SIZE, self.answers.entity_size)],
            [QUESTIONS[Step.SERVICE_SENSITIVITY]["title"],
             self._option(Step.SERVICE_SENSITIVITY, self.answers.service_sensitivity)],
        ]
        for name, label in flag_labels.items():
            data.append([label, "Oui" if getattr(infra, name) else "Non"])
        data.append([QUESTIONS[Step.GOVERNANCE_MATURITY]["title"],
                     self._option(Step.GOVERNANCE_MATURITY, self.answers.governance_maturity)])
        cell = ParagraphStyle("cell", fontSize=9, leading=11)
        rows = [data[0]] + [[Paragraph(escape(str(c)), cell) for c in row] for row in data[1:]]
        t = Table(rows, colWidths=[3.5*inch, 3.5*inch], repeatRows=1)
        t.setStyle(TableStyle(self._grid_style(BLUE)))
        els.append(t)
        return els

    def _score(self):
        b = self.result.breakdown
        els = [self._h1("Score")]
        data = [
            ["Critère", "Points"],
            ["Taille de l'entité", str(b.entity_size)],
            ["Sensibilité des services", str(b.service_sensitivity)],
            ["Infrastructure numérique", f"{b.infrastructure} (brut {b.infrastructure_raw}, plafond 3)"],
            ["Gouvernance", f"{b.governance:+d}"],
            ["Total", str(self.result.score)],
        ]
        t = Table(data, colWidths=[3.5*inch, 3.5*inch])
        t.setStyle(TableStyle(self._grid_style(DARK_BLUE)
                              + [("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold")]))
        els.append(t)
        return els

    def _content(self):
        c = self.result.content
        els = [self._h1(c.title)]
        els += [self._h1(SECTION_TITLES["implications"]), self._body(c.implications)]
        els.append(self._h1(SECTION_TITLES["obligations"]))
        for line in c.obligations:
            els.append(self._body(f"• {line}"))
        els += [self._h1(SECTION_TITLES["timeline"]), self._body(c.timeline)]
        els += [self._h1(SECTION_TITLES["accountability"]), self._body(c.accountability)]
        els += [self._h1(SECTION_TITLES["positioning"]), self._body(c.positioning)]
        return els

    @staticmethod
    def _option(step, value):
        if value is None:
            return "—"
        return QUESTIONS[step]["options"].get(value, value.value)

    @staticmethod
    def _grid_style(header_color):
        return [
            ("BACKGROUND", (0,0), (-1,0), header_color),
            ("TEXTCOLOR", (0,0), (-1,0), colors.white),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,-1), 9),
            ("ROWBACKGROUNDS", (0,1), (-1,-1), [GRAY, colors.white]),
            ("GRID", (0,0), (-1,-1), 0.5, colors.lightgrey),
            ("TOPPADDING", (0,0), (-1,-1), 5),
            ("BOTTOMPADDING", (0,0), (-1,-1), 5),
            ("LEFTPADDING", (0,0), (-1,-1), 6),
        ]
