"""Prompt templates, kept as literal data apart from the orchestration logic.

Every template renders as ``instructions + transcript + code [+ trailer]``.
The two bodies are concatenated verbatim: no escaping, no truncation, and
no ``str.format`` so braces in source code are never interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PromptTemplate:
    """A fixed instructional prompt with two interpolation points."""

    name: str
    instructions: str
    chat_heading: str = "## Chat Transcript:"
    code_heading: str = "## Final Code:"
    trailer: str = ""

    def render(self, chat_text: str, code_text: str) -> str:
        prompt = (
            f"{self.instructions}\n\n---\n\n"
            f"{self.chat_heading}\n{chat_text}\n\n"
            f"{self.code_heading}\n{code_text}"
        )
        if self.trailer:
            prompt += f"\n\n---\n\n{self.trailer}"
        return prompt


# ── Summary ─────────────────────────────────────────────────────────────────

SUMMARY_TEMPLATE = PromptTemplate(
    name="summary",
    instructions="""\
Summarize the following AI-assisted development session in 2–3 sentences.

Focus on:
- What Engineer 1 was trying to build
- Any major shifts in approach
- Tools or APIs used
- Current state of the work (e.g. incomplete, functional, missing validation)

Avoid code. Be concise and clear.""",
)

# ── Continuation context ────────────────────────────────────────────────────

CONTINUATION_CONTEXT_TEMPLATE = PromptTemplate(
    name="continuation-context",
    instructions="""\
You are an AI memory generator for coding assistants like Cursor. Your task \
is to create a structured context document that captures the full \
development process from a previous engineer, to be used by a second \
engineer's AI assistant to continue seamlessly.

You will be given:
- The full code at the time of handoff
- Logs of chat conversations between Engineer 1 and their coding assistants \
(Cursor, Claude, etc.), including prompts, code suggestions, errors, \
questions, and revisions

Output a detailed technical summary with the following structure:

1. Feature Name
2. Development Timeline (timestamped major events)
3. Original Goals (what the engineer was trying to achieve)
4. Coding History:
   - Key code changes with associated prompts
   - Important implementation decisions
   - Deleted or replaced approaches
   - Bugs and error messages encountered
5. Resolved vs Unresolved Issues
6. Remaining TODOs
7. Dependencies and External Services
8. Engineer 1's coding preferences or style notes (e.g. "prefers minimal \
error handling", "used async/await throughout")

This document will serve as **working context for the next engineer's AI \
assistant**, so avoid unnecessary commentary. Prioritize clarity, \
completeness, and deep technical accuracy. Include relevant code snippets \
and time markers to help AI interpret the codebase like Engineer 1 did.""",
    trailer="""\
Please return only the structured context document that can be pasted into \
Cursor/Claude to give the AI assistant full context of Engineer 1's work.""",
)

# ── README ──────────────────────────────────────────────────────────────────

README_TEMPLATE = PromptTemplate(
    name="readme",
    instructions="""\
You are a senior AI developer assistant. Your task is to generate a clear, \
human-readable README for a second engineer inheriting a coding project \
mid-sprint.

You will be given:
- Full source code at the time of handoff
- A chronological log of conversations between Engineer 1 and their AI \
assistants (Cursor, Claude, etc), including all prompts, responses, code \
snippets, questions, bugs, and notes.

Your job is to extract and organize the full **thought process** of \
Engineer 1 into a concise but thorough README. It must help Engineer 2 \
quickly understand:

1. What was the goal of the work Engineer 1 was doing?
2. What did the code look like when they started?
3. How did it change over time? (Include timestamps with major events)
4. What bugs or blockers did they face? How were these resolved?
5. What tradeoffs were made or shortcuts taken?
6. Are there any known gaps, risks, or unfinished elements?
7. Any critical TODOs or handoff notes?
8. What patterns or intentions does Engineer 2 need to know to continue work?

Format the README with clearly marked sections and timestamps (e.g. Monday \
11:04am – Fixed image upload bug by bypassing validation check). Use bullet \
points and code snippets when helpful. Prioritize clarity, context, and \
continuity. Assume Engineer 2 has access to the code but not the full chat \
history.""",
)

# ── Combined (default) ──────────────────────────────────────────────────────

COMBINED_TEMPLATE = PromptTemplate(
    name="combined",
    instructions="""\
You're an AI summarizer for engineering handoffs.

A developer worked on a feature using AI tools like Cursor and Claude. \
Below is their chat log and final code.

Generate:

### README.md
- What they built
- Key decisions
- Tradeoffs
- Tools used
- TODOs
- Red flags

### Cursor Log
Reconstruct the session as:
### Engineer:
...
### AI:
...""",
    chat_heading="## Chat Export:",
    trailer="""\
Please provide your response in the following format:

## README.md
[Your README content here]

## Cursor Log
[Your Cursor log reconstruction here]""",
)
